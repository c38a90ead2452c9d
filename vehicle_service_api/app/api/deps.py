"""
FastAPI dependencies wiring the enrichment service.

A fresh vehicle store, customer client and enrichment service are
built for every request, so overlapping requests share no mutable
state.  The customer client's HTTP session is closed once the
response has been produced.  Tests replace these providers through
``app.dependency_overrides``.
"""

from typing import Iterator

from fastapi import Depends

from vehicle_service_api.app.clients.customer_service import CustomerServiceClient
from vehicle_service_api.app.core.config import settings
from vehicle_service_api.app.core.db import get_database_path
from vehicle_service_api.app.services.enrichment_service import EnrichmentService
from vehicle_service_api.app.services.stores import CustomerDirectory, VehicleStore
from vehicle_service_api.app.services.vehicle_service import SQLiteVehicleStore


def get_vehicle_store() -> VehicleStore:
    return SQLiteVehicleStore(get_database_path())


def get_customer_directory() -> Iterator[CustomerDirectory]:
    client = CustomerServiceClient(
        base_url=settings.customer_service_url,
        connect_timeout=settings.customer_service_connect_timeout,
        read_timeout=settings.customer_service_read_timeout,
    )
    try:
        yield client
    finally:
        client.close()


def get_enrichment_service(
    vehicles: VehicleStore = Depends(get_vehicle_store),
    customers: CustomerDirectory = Depends(get_customer_directory),
) -> EnrichmentService:
    return EnrichmentService(vehicles, customers)
