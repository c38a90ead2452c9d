"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service can start locally next to a customer service listening on
port 8888.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Vehicle Service API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database holding vehicle records.  Relative
    # paths are resolved against the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "vehicle_service.db")

    # Base URL of the customer service.  Owner data is fetched from
    # ``{customer_service_url}/api/customer``.
    customer_service_url: str = os.getenv(
        "CUSTOMER_SERVICE_URL", "http://localhost:8888/CUSTOMER-SERVICE"
    )
    customer_service_connect_timeout: float = float(os.getenv("CUSTOMER_SERVICE_CONNECT_TIMEOUT", "5"))
    customer_service_read_timeout: float = float(os.getenv("CUSTOMER_SERVICE_READ_TIMEOUT", "5"))

    # When enabled, an empty vehicles table is populated with a few
    # sample rows on startup.  Owners 1..3 match the sample customers
    # of the customer service.
    seed_sample_data: bool = os.getenv("SEED_SAMPLE_DATA", "false").lower() in {"1", "true", "yes"}

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8082"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
