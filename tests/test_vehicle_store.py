from __future__ import annotations

import pytest

from vehicle_service_api.app.core.db import SAMPLE_VEHICLES, init_db
from vehicle_service_api.app.core.exceptions import DuplicateRegistrationError
from vehicle_service_api.app.schemas.vehicle import VehicleCreate
from vehicle_service_api.app.services.vehicle_service import SQLiteVehicleStore


@pytest.fixture
def store(tmp_path) -> SQLiteVehicleStore:
    db_path = str(tmp_path / "vehicles.db")
    init_db(db_path)
    return SQLiteVehicleStore(db_path)


def _create(store: SQLiteVehicleStore, plate: str, owner_id: int = 1):
    return store.create(VehicleCreate(brand="Toyota", model="Yaris", registration_number=plate, owner_id=owner_id))


def test_create_assigns_ids_and_round_trips(store) -> None:
    first = _create(store, "AA-1")
    second = _create(store, "AA-2", owner_id=2)

    assert second.id > first.id
    assert store.find_by_id(first.id) == first
    assert store.find_by_id(999) is None


def test_find_all_keeps_insertion_order(store) -> None:
    created = [_create(store, plate) for plate in ("C-3", "A-1", "B-2")]

    assert store.find_all() == created


def test_find_by_owner_and_registration(store) -> None:
    _create(store, "X-1", owner_id=1)
    second = _create(store, "X-2", owner_id=2)
    third = _create(store, "X-3", owner_id=2)

    assert store.find_by_owner_id(2) == [second, third]
    assert store.find_by_owner_id(3) == []
    assert store.find_by_registration_number("X-3") == third
    assert store.find_by_registration_number("nope") is None


def test_duplicate_registration_rejected(store) -> None:
    _create(store, "DUP-1")

    with pytest.raises(DuplicateRegistrationError):
        _create(store, "DUP-1", owner_id=5)
    assert len(store.find_all()) == 1


def test_seed_only_fills_empty_table(tmp_path) -> None:
    db_path = str(tmp_path / "seeded.db")
    init_db(db_path, seed=True)
    init_db(db_path, seed=True)

    vehicles = SQLiteVehicleStore(db_path).find_all()

    assert [v.registration_number for v in vehicles] == [row[2] for row in SAMPLE_VEHICLES]
