"""
Pydantic models for vehicle data.

``VehicleCreate`` is the payload used to register a vehicle,
``VehicleRecord`` is a stored row and ``EnrichedVehicleView`` is the
record joined with its owner as returned by the read endpoints.

``owner_id`` is a plain identifier of a customer living in another
service.  Nothing checks that the customer exists; the reference is
resolved at read time through the customer directory and may come
back empty.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .customer import CustomerRecord


class VehicleBase(BaseModel):
    brand: str = Field(..., min_length=1, max_length=100, example="Toyota")
    model: str = Field(..., min_length=1, max_length=100, example="Yaris")
    registration_number: str = Field(..., min_length=1, max_length=50, example="A-1234-25")
    owner_id: int = Field(..., example=1)


class VehicleCreate(VehicleBase):
    """Schema for registering a vehicle."""
    pass


class VehicleRecord(VehicleBase):
    """A vehicle as stored locally."""

    id: int

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }


class EnrichedVehicleView(BaseModel):
    """A vehicle joined with its owner.

    ``owner`` is either the customer whose id equals the vehicle's
    ``owner_id`` or ``None`` when the customer service has no such
    customer.  Views are built per request and never stored.
    """

    vehicle_id: int = Field(..., alias="vehicleId")
    brand: str = Field(..., alias="manufacturerBrand")
    model: str = Field(..., alias="vehicleModel")
    registration_number: str = Field(..., alias="registrationPlateNumber")
    owner: Optional[CustomerRecord] = Field(None, alias="associatedCustomer")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @classmethod
    def from_record(cls, vehicle: VehicleRecord, owner: Optional[CustomerRecord]) -> "EnrichedVehicleView":
        if owner is not None and owner.id != vehicle.owner_id:
            raise ValueError(
                f"Customer {owner.id} does not own vehicle {vehicle.id} (owner_id={vehicle.owner_id})"
            )
        return cls(
            vehicle_id=vehicle.id,
            brand=vehicle.brand,
            model=vehicle.model,
            registration_number=vehicle.registration_number,
            owner=owner,
        )
