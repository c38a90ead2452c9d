"""
Exception types raised by the vehicle service.

Routes translate these into HTTP responses: a missing vehicle becomes
400, an unreachable customer service 503 and a duplicate registration
number 409.  A customer that simply does not exist upstream is not an
error at all; it shows up as ``owner=None`` on the enriched view.
"""

from typing import Any


class VehicleServiceError(Exception):
    """Base class for all errors raised by the service layer."""


class VehicleNotFoundError(VehicleServiceError, LookupError):
    """The requested vehicle does not exist in the local store."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Vehicle not found with identifier: {key}")


class UpstreamUnavailableError(VehicleServiceError):
    """The customer service could not be reached or answered garbage.

    Covers connection errors, timeouts, 5xx responses and bodies that
    do not parse into customer records.
    """


class DuplicateRegistrationError(VehicleServiceError, ValueError):
    """A vehicle with the same registration number already exists."""

    def __init__(self, registration_number: str) -> None:
        self.registration_number = registration_number
        super().__init__(f"Registration number already in use: {registration_number}")
