from .customer_service import CustomerService
from .rental_service import RentalService
from .vehicle_service import VehicleService

__all__ = [
    "RentalService",
    "VehicleService",
    "CustomerService",
]
