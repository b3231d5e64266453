import logging
import threading
from typing import Optional

from rental_agency.exceptions import InvalidReturnError, VehicleUnavailableError
from rental_agency.models.customer import Customer
from rental_agency.models.transaction import RentalTransaction
from rental_agency.models.vehicle import VehicleBase
from rental_agency.utils.validators import require_days

logger = logging.getLogger(__name__)


class RentalAgency:
    """
    Owns the fleet, the transaction log and the customer directory.

    Every public method runs under one re-entrant lock per agency, so a
    rent and a return racing on the same vehicle see a consistent
    availability flag when the agency is shared by the web app.
    """
    _inst = None
    _inst_lock = threading.Lock()

    def __init__(self, name: str = "default"):
        self.name = name
        self.fleet: list[VehicleBase] = []
        self.transactions: list[RentalTransaction] = []
        self.customers: dict[str, Customer] = {}
        self._rw = threading.RLock()
        logger.debug("[Agency] Created agency %r", name)

    # ---------- Singleton ----------
    @classmethod
    def instance(cls):
        """Return the process-wide default agency, creating it on first use."""
        with cls._inst_lock:
            if cls._inst is None:
                cls._inst = RentalAgency()
        return cls._inst

    def reset(self):
        """Drop every vehicle, transaction and customer."""
        with self._rw:
            self.fleet.clear()
            self.transactions.clear()
            self.customers.clear()
            logger.debug("[Agency] Reset agency %r", self.name)

    # ---------- Fleet ----------
    def add_vehicle(self, vehicle: VehicleBase) -> None:
        """Append to the fleet. Duplicate ids are not rejected."""
        with self._rw:
            self.fleet.append(vehicle)

    def find_vehicle(self, vehicle_id: str) -> Optional[VehicleBase]:
        """First vehicle in insertion order with this id, or None."""
        with self._rw:
            for v in self.fleet:
                if v.vehicle_id == vehicle_id:
                    return v
            return None

    def available_vehicles(self) -> list[VehicleBase]:
        with self._rw:
            return [v for v in self.fleet if v.is_available_for_rental()]

    # ---------- Customers ----------
    def register_customer(self, customer: Customer) -> Customer:
        """Add or replace a customer in the directory."""
        with self._rw:
            self.customers[customer.customer_id] = customer
            return customer

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        with self._rw:
            return self.customers.get(customer_id)

    def get_or_register_customer(self, customer_id: str) -> Customer:
        """Look up a customer; unknown ids are registered under their own id as name."""
        with self._rw:
            customer = self.customers.get(customer_id)
            if customer is None:
                customer = self.register_customer(Customer(customer_id, customer_id))
            return customer

    # ---------- Rentals ----------
    def rent_vehicle(self, vehicle_id: str, customer: Customer, days: int) -> RentalTransaction:
        """
        Rent the first available vehicle with `vehicle_id` to `customer`.

        Raises VehicleUnavailableError when no vehicle with that id is
        available; an unknown id and an already rented vehicle are reported
        the same way.
        """
        require_days(days)
        with self._rw:
            for vehicle in self.fleet:
                if vehicle.vehicle_id == vehicle_id and vehicle.is_available_for_rental():
                    cost = vehicle.calculate_rental_cost(days)
                    vehicle.set_available(False)
                    txn = RentalTransaction(vehicle_id, customer.customer_id, days, cost,
                                            vehicle.model, vehicle.vehicle_type)
                    self.transactions.append(txn)
                    customer.add_rental(vehicle_id)
                    logger.info("Vehicle rented: %s | Rental cost: %s", vehicle.model, cost)
                    return txn
        raise VehicleUnavailableError()

    def return_vehicle(self, vehicle_id: str) -> VehicleBase:
        """
        Mark the first rented vehicle with `vehicle_id` available again.

        Raises InvalidReturnError when no rented vehicle has that id.
        """
        with self._rw:
            for vehicle in self.fleet:
                if vehicle.vehicle_id == vehicle_id and not vehicle.is_available_for_rental():
                    vehicle.set_available(True)
                    logger.info("Vehicle returned: %s", vehicle.model)
                    return vehicle
        raise InvalidReturnError()

    def get_transactions(self) -> tuple[RentalTransaction, ...]:
        """Snapshot of the log in insertion order."""
        with self._rw:
            return tuple(self.transactions)
