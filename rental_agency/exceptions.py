"""
Custom exception classes for the vehicle rental agency.

Each error carries a human readable `message` so the CLI and the HTTP
controllers can show it as-is instead of a traceback.
"""


class AgencyError(Exception):
    """Base class for every error raised by the rental agency."""

    default_message = "Error: rental agency failure"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidArgumentError(AgencyError, ValueError):
    """Raised when a model, name, rate or rental length is rejected."""

    default_message = "Error: invalid argument"


class VehicleUnavailableError(AgencyError):
    """Raised when a vehicle id is unknown or the vehicle is already rented."""

    default_message = "Vehicle not available or invalid ID"


class InvalidReturnError(AgencyError):
    """Raised when a vehicle id is unknown or the vehicle is not rented."""

    default_message = "Vehicle ID is invalid or vehicle is not rented"


class VehicleNotFoundError(AgencyError):
    """Raised when a vehicle ID cannot be found in the fleet."""

    default_message = "Error: vehicle not found"


class CustomerNotFoundError(AgencyError):
    """Raised when a customer ID cannot be found in the agency directory."""

    default_message = "Error: customer not found"
