"""
Enrichment of vehicle records with owner data.

Vehicles are stored locally but their owners live in the customer
service.  ``EnrichmentService`` joins the two and applies a different
failure policy depending on the shape of the request:

* Single-vehicle lookups (``get_vehicle``, ``get_vehicle_by_registration``,
  ``list_vehicles_by_owner``) issue one ``get_customer`` call.  If the
  customer service fails, the whole call fails; the caller asked for a
  fully resolved answer and must not be handed a silently missing owner.
* The listing (``list_vehicles``) issues exactly one bulk
  ``list_customers`` call no matter how many vehicles there are.  If
  that call fails, the listing fails.  If it succeeds, vehicles whose
  owner is absent from the result are returned with ``owner=None``
  while the others are populated.

In both cases a customer that does not exist upstream is not an error:
the reference may be stale while the vehicle itself is real.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from vehicle_service_api.app.core.exceptions import UpstreamUnavailableError, VehicleNotFoundError
from vehicle_service_api.app.schemas.customer import CustomerRecord
from vehicle_service_api.app.schemas.vehicle import EnrichedVehicleView, VehicleCreate, VehicleRecord
from vehicle_service_api.app.services.stores import CustomerDirectory, VehicleStore


logger = logging.getLogger(__name__)


class EnrichmentService:
    """Join vehicles from a ``VehicleStore`` with customers from a ``CustomerDirectory``.

    The service holds no state of its own beyond its two collaborators;
    every call reads fresh data from both.
    """

    def __init__(self, vehicles: VehicleStore, customers: CustomerDirectory) -> None:
        self.vehicles = vehicles
        self.customers = customers

    def get_vehicle(self, vehicle_id: int) -> EnrichedVehicleView:
        """Return one vehicle with its owner resolved.

        Raises:
            VehicleNotFoundError: No vehicle has this id.  The customer
                service is not contacted.
            UpstreamUnavailableError: The customer lookup failed.
        """
        vehicle = self.vehicles.find_by_id(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(vehicle_id)
        return self._enrich_one(vehicle)

    def get_vehicle_by_registration(self, registration_number: str) -> EnrichedVehicleView:
        """Same as :meth:`get_vehicle` but keyed by registration number."""
        vehicle = self.vehicles.find_by_registration_number(registration_number)
        if vehicle is None:
            raise VehicleNotFoundError(registration_number)
        return self._enrich_one(vehicle)

    def list_vehicles(self) -> List[EnrichedVehicleView]:
        """Return every vehicle joined with its owner.

        The customer collection is fetched once and joined in memory.
        The result has one view per stored vehicle, in store order.

        Raises:
            UpstreamUnavailableError: The bulk customer call failed.
        """
        vehicles = self.vehicles.find_all()
        customers = self.customers.list_customers()
        index = self._index_customers(customers)
        views = []
        for vehicle in vehicles:
            owner = index.get(vehicle.owner_id)
            if owner is None:
                logger.info(
                    "Owner %s of vehicle %s not found in customer service",
                    vehicle.owner_id,
                    vehicle.id,
                )
            views.append(EnrichedVehicleView.from_record(vehicle, owner))
        return views

    def list_vehicles_by_owner(self, owner_id: int) -> List[EnrichedVehicleView]:
        """Return the vehicles of one owner.

        The owner is fetched with a single ``get_customer`` call shared by
        all returned views.  No remote call is made when the owner has no
        vehicles.

        Raises:
            UpstreamUnavailableError: The customer lookup failed.
        """
        vehicles = self.vehicles.find_by_owner_id(owner_id)
        if not vehicles:
            return []
        owner = self._fetch_owner(owner_id)
        return [EnrichedVehicleView.from_record(vehicle, owner) for vehicle in vehicles]

    def register_vehicle(self, data: VehicleCreate) -> VehicleRecord:
        """Store a new vehicle.

        ``owner_id`` is not checked against the customer service.
        """
        return self.vehicles.create(data)

    def _enrich_one(self, vehicle: VehicleRecord) -> EnrichedVehicleView:
        owner = self._fetch_owner(vehicle.owner_id)
        if owner is None:
            logger.info("Owner %s of vehicle %s not found in customer service", vehicle.owner_id, vehicle.id)
        return EnrichedVehicleView.from_record(vehicle, owner)

    def _fetch_owner(self, owner_id: int) -> Optional[CustomerRecord]:
        owner = self.customers.get_customer(owner_id)
        if owner is not None and owner.id != owner_id:
            logger.error("Customer service answered customer %s when asked for %s", owner.id, owner_id)
            raise UpstreamUnavailableError(
                f"Customer service returned customer {owner.id} for id {owner_id}"
            )
        return owner

    @staticmethod
    def _index_customers(customers: Sequence[CustomerRecord]) -> Dict[int, CustomerRecord]:
        # First occurrence wins if the upstream ever returns duplicate ids.
        index: Dict[int, CustomerRecord] = {}
        for customer in customers:
            index.setdefault(customer.id, customer)
        return index
