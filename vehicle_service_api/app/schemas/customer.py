"""
Pydantic model for customer records owned by the customer service.

The vehicle service never writes customers; it only reads snapshots.
The customer service serialises the name as ``name`` while this API
publishes it as ``fullName``, so both spellings are accepted on input.
"""

from pydantic import AliasChoices, BaseModel, Field


class CustomerRecord(BaseModel):
    """Read-only snapshot of a customer."""

    id: int = Field(..., example=1)
    full_name: str = Field(
        ...,
        validation_alias=AliasChoices("fullName", "name", "full_name"),
        serialization_alias="fullName",
        example="Amine SAFI",
    )
    age: float = Field(..., example=23.0)

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }
