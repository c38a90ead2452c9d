"""
SQLite database integration for vehicle records.

This module provides functions for obtaining a database connection
(``get_connection``), creating the ``vehicles`` table on application
start (``init_db``) and a cursor context manager.  A new connection is
opened for every store call so concurrent requests never share a
connection or a transaction.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


logger = logging.getLogger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS vehicles (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    brand TEXT NOT NULL,
    model TEXT NOT NULL,
    registration_number TEXT NOT NULL UNIQUE,
    owner_id INTEGER NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_vehicles_owner_id ON vehicles(owner_id);
"""

# Owner ids refer to the sample customers created by the customer service.
SAMPLE_VEHICLES = [
    ("Toyota", "Yaris", "A-1234-25", 1),
    ("Renault", "Clio", "B-5678-25", 2),
    ("Dacia", "Logan", "C-9012-25", 3),
]


def get_database_path(db_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured path is absolute it is used directly; otherwise
    it is resolved relative to the package root.
    """
    db_url = db_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # vehicle_service_api/
    return str((base_dir / db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection with dict-like rows."""
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None, seed: bool = False) -> None:
    """Create the vehicles table if needed.

    When ``seed`` is true and the table is empty, ``SAMPLE_VEHICLES``
    are inserted.
    """
    with get_cursor(db_path) as cursor:
        cursor.executescript(SCHEMA)
        if not seed:
            return
        row = cursor.execute("SELECT COUNT(*) AS total FROM vehicles").fetchone()
        if row["total"]:
            return
        cursor.executemany(
            "INSERT INTO vehicles (brand, model, registration_number, owner_id) VALUES (?, ?, ?, ?)",
            SAMPLE_VEHICLES,
        )
        logger.info("Seeded %d sample vehicles", len(SAMPLE_VEHICLES))
