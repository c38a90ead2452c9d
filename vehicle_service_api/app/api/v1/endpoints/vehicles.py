"""
Vehicle endpoints for API v1.

Read endpoints return vehicles enriched with their owner as fetched
from the customer service.  A vehicle id that does not exist yields
400, an unreachable customer service 503.  A listing succeeds as long
as the customer service answers, even if some owners are missing from
its answer; those vehicles carry ``associatedCustomer: null``.

Handlers are plain functions: the service does blocking I/O (SQLite
and ``requests``), which FastAPI runs in its threadpool.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from vehicle_service_api.app.api.deps import get_enrichment_service
from vehicle_service_api.app.core.exceptions import (
    DuplicateRegistrationError,
    UpstreamUnavailableError,
    VehicleNotFoundError,
)
from vehicle_service_api.app.schemas.vehicle import EnrichedVehicleView, VehicleCreate, VehicleRecord
from vehicle_service_api.app.services.enrichment_service import EnrichmentService


logger = logging.getLogger(__name__)

router = APIRouter()


def _upstream_error(exc: UpstreamUnavailableError) -> HTTPException:
    logger.warning("Customer service unavailable: %s", exc)
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))


@router.get("/", response_model=List[EnrichedVehicleView])
def list_vehicles(
    service: EnrichmentService = Depends(get_enrichment_service),
) -> List[EnrichedVehicleView]:
    """Retrieve all vehicles with their owners.

    The customer service is queried once for the whole listing.
    """
    try:
        return service.list_vehicles()
    except UpstreamUnavailableError as e:
        raise _upstream_error(e) from e


@router.post("/", response_model=VehicleRecord, status_code=status.HTTP_201_CREATED)
def register_vehicle(
    vehicle: VehicleCreate,
    service: EnrichmentService = Depends(get_enrichment_service),
) -> VehicleRecord:
    """Register a new vehicle.

    The owner reference is stored as given; the customer service is
    not consulted.  Returns 409 if the registration number is taken.
    """
    try:
        return service.register_vehicle(vehicle)
    except DuplicateRegistrationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.get("/owner/{owner_id}", response_model=List[EnrichedVehicleView])
def list_vehicles_by_owner(
    owner_id: int,
    service: EnrichmentService = Depends(get_enrichment_service),
) -> List[EnrichedVehicleView]:
    """List the vehicles of one owner; an empty list if there are none."""
    try:
        return service.list_vehicles_by_owner(owner_id)
    except UpstreamUnavailableError as e:
        raise _upstream_error(e) from e


@router.get("/registration/{registration_number}", response_model=EnrichedVehicleView)
def get_vehicle_by_registration(
    registration_number: str,
    service: EnrichmentService = Depends(get_enrichment_service),
) -> EnrichedVehicleView:
    try:
        return service.get_vehicle_by_registration(registration_number)
    except VehicleNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except UpstreamUnavailableError as e:
        raise _upstream_error(e) from e


@router.get("/{vehicle_id}", response_model=EnrichedVehicleView)
def get_vehicle(
    vehicle_id: int,
    service: EnrichmentService = Depends(get_enrichment_service),
) -> EnrichedVehicleView:
    """Retrieve a single vehicle with its owner.

    Either the owner lookup succeeds (possibly with no matching
    customer) or the whole request fails with 503.
    """
    try:
        return service.get_vehicle(vehicle_id)
    except VehicleNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except UpstreamUnavailableError as e:
        raise _upstream_error(e) from e
