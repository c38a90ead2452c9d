"""
In-memory implementations of the store contracts.

``InMemoryVehicleStore`` and ``InMemoryCustomerDirectory`` keep their
records in dictionaries guarded by a lock and hand out copies, so a
reader always sees a consistent snapshot even while another thread
mutates the store.  The customer directory counts the calls it
receives and can be told to fail, which makes it convenient for
exercising the enrichment service without a running customer service.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional

from vehicle_service_api.app.core.exceptions import DuplicateRegistrationError, UpstreamUnavailableError
from vehicle_service_api.app.schemas.customer import CustomerRecord
from vehicle_service_api.app.schemas.vehicle import VehicleCreate, VehicleRecord
from vehicle_service_api.app.services.stores import CustomerDirectory, VehicleStore


class InMemoryVehicleStore(VehicleStore):
    """Vehicle store backed by an insertion-ordered dictionary."""

    def __init__(self, vehicles: Iterable[VehicleRecord] = ()) -> None:
        self._lock = threading.Lock()
        self._vehicles: Dict[int, VehicleRecord] = {}
        for vehicle in vehicles:
            self._vehicles[vehicle.id] = vehicle
        self._next_id = max(self._vehicles, default=0) + 1

    def find_by_id(self, vehicle_id: int) -> Optional[VehicleRecord]:
        with self._lock:
            return self._vehicles.get(vehicle_id)

    def find_all(self) -> List[VehicleRecord]:
        with self._lock:
            return list(self._vehicles.values())

    def find_by_owner_id(self, owner_id: int) -> List[VehicleRecord]:
        with self._lock:
            return [v for v in self._vehicles.values() if v.owner_id == owner_id]

    def find_by_registration_number(self, registration_number: str) -> Optional[VehicleRecord]:
        with self._lock:
            for vehicle in self._vehicles.values():
                if vehicle.registration_number == registration_number:
                    return vehicle
            return None

    def create(self, data: VehicleCreate) -> VehicleRecord:
        with self._lock:
            if any(v.registration_number == data.registration_number for v in self._vehicles.values()):
                raise DuplicateRegistrationError(data.registration_number)
            record = VehicleRecord(id=self._next_id, **data.model_dump())
            self._vehicles[record.id] = record
            self._next_id += 1
            return record

    def delete(self, vehicle_id: int) -> None:
        with self._lock:
            self._vehicles.pop(vehicle_id, None)


class InMemoryCustomerDirectory(CustomerDirectory):
    """Customer directory backed by a list of records.

    The list may contain duplicate ids, mirroring a misbehaving
    upstream.  ``get_customer`` returns the first match.

    Attributes:
        single_calls: Number of ``get_customer`` calls received.
        bulk_calls: Number of ``list_customers`` calls received.
        failure: When set, every call raises this exception instead of
            answering.
    """

    def __init__(self, customers: Iterable[CustomerRecord] = ()) -> None:
        self._lock = threading.Lock()
        self._customers: List[CustomerRecord] = list(customers)
        self.single_calls = 0
        self.bulk_calls = 0
        self.failure: Optional[Exception] = None

    def fail_with(self, error: Optional[Exception] = None) -> None:
        """Make subsequent calls raise ``error`` (an upstream outage by default)."""
        self.failure = error or UpstreamUnavailableError("Customer service unavailable")

    def put(self, customer: CustomerRecord) -> None:
        with self._lock:
            self._customers = [c for c in self._customers if c.id != customer.id]
            self._customers.append(customer)

    def remove(self, customer_id: int) -> None:
        with self._lock:
            self._customers = [c for c in self._customers if c.id != customer_id]

    def get_customer(self, customer_id: int) -> Optional[CustomerRecord]:
        with self._lock:
            self.single_calls += 1
            if self.failure is not None:
                raise self.failure
            return next((c for c in self._customers if c.id == customer_id), None)

    def list_customers(self) -> List[CustomerRecord]:
        with self._lock:
            self.bulk_calls += 1
            if self.failure is not None:
                raise self.failure
            return list(self._customers)
