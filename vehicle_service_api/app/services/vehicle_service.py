"""
SQLite-backed vehicle store.

All queries use parameterized statements.  Each method opens its own
connection, so every call observes a point-in-time snapshot of the
table and concurrent requests never share a cursor.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from vehicle_service_api.app.core.db import get_connection, get_database_path
from vehicle_service_api.app.core.exceptions import DuplicateRegistrationError
from vehicle_service_api.app.schemas.vehicle import VehicleCreate, VehicleRecord
from vehicle_service_api.app.services.stores import VehicleStore


logger = logging.getLogger(__name__)


class SQLiteVehicleStore(VehicleStore):
    """Vehicle store persisting rows in the ``vehicles`` table."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path or get_database_path()

    def find_by_id(self, vehicle_id: int) -> Optional[VehicleRecord]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute("SELECT * FROM vehicles WHERE id = ?", (vehicle_id,)).fetchone()
            return self._row_to_record(row) if row else None
        finally:
            conn.close()

    def find_all(self) -> List[VehicleRecord]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute("SELECT * FROM vehicles ORDER BY id ASC").fetchall()
            return [self._row_to_record(row) for row in rows]
        finally:
            conn.close()

    def find_by_owner_id(self, owner_id: int) -> List[VehicleRecord]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                "SELECT * FROM vehicles WHERE owner_id = ? ORDER BY id ASC",
                (owner_id,),
            ).fetchall()
            return [self._row_to_record(row) for row in rows]
        finally:
            conn.close()

    def find_by_registration_number(self, registration_number: str) -> Optional[VehicleRecord]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT * FROM vehicles WHERE registration_number = ?",
                (registration_number,),
            ).fetchone()
            return self._row_to_record(row) if row else None
        finally:
            conn.close()

    def create(self, data: VehicleCreate) -> VehicleRecord:
        """Insert a new vehicle and return the created record.

        The UNIQUE constraint on ``registration_number`` is the source
        of truth for duplicates, so two concurrent inserts of the same
        plate cannot both succeed.
        """
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    """
                    INSERT INTO vehicles (brand, model, registration_number, owner_id)
                    VALUES (?, ?, ?, ?)
                    """,
                    (data.brand, data.model, data.registration_number, data.owner_id),
                )
            except sqlite3.IntegrityError as exc:
                raise DuplicateRegistrationError(data.registration_number) from exc
            vehicle_id = cursor.lastrowid
            conn.commit()
            logger.info("Created vehicle %s (%s)", vehicle_id, data.registration_number)
            row = cursor.execute("SELECT * FROM vehicles WHERE id = ?", (vehicle_id,)).fetchone()
            return self._row_to_record(row)
        finally:
            conn.close()

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> VehicleRecord:
        return VehicleRecord(
            id=row["id"],
            brand=row["brand"],
            model=row["model"],
            registration_number=row["registration_number"],
            owner_id=row["owner_id"],
        )
