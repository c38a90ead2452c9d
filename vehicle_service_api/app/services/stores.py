"""
Collaborator contracts consumed by the enrichment service.

Two interfaces are defined: ``VehicleStore`` for local vehicle records
and ``CustomerDirectory`` for customer records that live behind a
network boundary.  Implementations may be swapped freely (SQLite vs.
in-memory, HTTP vs. in-memory) without touching the enrichment logic.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from vehicle_service_api.app.schemas.customer import CustomerRecord
from vehicle_service_api.app.schemas.vehicle import VehicleCreate, VehicleRecord


class VehicleStore(ABC):
    """Local store of vehicle records."""

    @abstractmethod
    def find_by_id(self, vehicle_id: int) -> Optional[VehicleRecord]:
        """Return the vehicle with ``vehicle_id`` or ``None``."""

    @abstractmethod
    def find_all(self) -> List[VehicleRecord]:
        """Return every vehicle in insertion order."""

    @abstractmethod
    def find_by_owner_id(self, owner_id: int) -> List[VehicleRecord]:
        """Return the vehicles referencing ``owner_id``, in insertion order."""

    @abstractmethod
    def find_by_registration_number(self, registration_number: str) -> Optional[VehicleRecord]:
        """Return the vehicle carrying ``registration_number`` or ``None``."""

    @abstractmethod
    def create(self, data: VehicleCreate) -> VehicleRecord:
        """Insert a vehicle and return it with its assigned id.

        Raises:
            DuplicateRegistrationError: If the registration number is
                already used by another vehicle.
        """


class CustomerDirectory(ABC):
    """Read access to customer records owned by another service.

    Both methods raise ``UpstreamUnavailableError`` when the directory
    cannot be reached or answers with something that is not a customer
    record.  A customer that does not exist is reported as ``None`` by
    ``get_customer`` and is simply missing from ``list_customers``.
    """

    @abstractmethod
    def get_customer(self, customer_id: int) -> Optional[CustomerRecord]:
        """Fetch one customer, ``None`` if it does not exist."""

    @abstractmethod
    def list_customers(self) -> List[CustomerRecord]:
        """Fetch the whole customer collection in a single call."""
