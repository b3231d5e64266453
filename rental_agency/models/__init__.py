from .agency import RentalAgency
from .customer import Customer
from .transaction import RentalTransaction
from .vehicle import Car, Motorcycle, Truck, VehicleBase

__all__ = [
    "RentalAgency",
    "Customer",
    "RentalTransaction",
    "VehicleBase",
    "Car",
    "Motorcycle",
    "Truck",
]
