from __future__ import annotations

from typing import List

import pytest

from vehicle_service_api.app.schemas.customer import CustomerRecord
from vehicle_service_api.app.schemas.vehicle import VehicleRecord
from vehicle_service_api.app.services.enrichment_service import EnrichmentService
from vehicle_service_api.app.services.memory import InMemoryCustomerDirectory, InMemoryVehicleStore


def make_vehicle(vehicle_id: int, owner_id: int, **overrides) -> VehicleRecord:
    fields = {
        "id": vehicle_id,
        "brand": "Toyota",
        "model": "Yaris",
        "registration_number": f"REG-{vehicle_id:04d}",
        "owner_id": owner_id,
    }
    fields.update(overrides)
    return VehicleRecord(**fields)


def make_customer(customer_id: int, name: str = "Amine SAFI", age: float = 23.0) -> CustomerRecord:
    return CustomerRecord(id=customer_id, full_name=name, age=age)


@pytest.fixture
def vehicles() -> List[VehicleRecord]:
    return [
        make_vehicle(1, 10, brand="Renault", model="Clio"),
        make_vehicle(2, 11, brand="Dacia", model="Logan"),
    ]


@pytest.fixture
def vehicle_store(vehicles: List[VehicleRecord]) -> InMemoryVehicleStore:
    return InMemoryVehicleStore(vehicles)


@pytest.fixture
def customer_directory() -> InMemoryCustomerDirectory:
    return InMemoryCustomerDirectory([make_customer(10, "A"), make_customer(11, "B", 41.0)])


@pytest.fixture
def service(vehicle_store: InMemoryVehicleStore, customer_directory: InMemoryCustomerDirectory) -> EnrichmentService:
    return EnrichmentService(vehicle_store, customer_directory)
