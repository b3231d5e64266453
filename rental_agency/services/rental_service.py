"""Rental-related service layer utilities."""

from typing import Optional

from rental_agency.exceptions import (
    InvalidArgumentError,
    InvalidReturnError,
    VehicleUnavailableError,
)
from rental_agency.models.agency import RentalAgency
from rental_agency.services import common
from rental_agency.services.common import parse_days
from rental_agency.services.customer_service import CustomerService
from rental_agency.utils.constants import RENTED_MSG, RETURNED_MSG


class RentalService:
    """
    Rent, return and transaction log operations.
    Uses polymorphic pricing (VehicleBase.calculate_rental_cost).
    """

    @staticmethod
    def rent(
            vehicle_id: str,
            customer_id: str,
            days,
            agency: Optional[RentalAgency] = None,
    ):
        """
        Rent a vehicle to a customer for `days` days. Unknown customer ids
        are registered on the fly.

        Returns:
            (ok: bool, message: str, transaction: Optional[RentalTransaction])
        """
        try:
            msg, txn = RentalService.checkout(vehicle_id, customer_id, days, agency)
        except (InvalidArgumentError, VehicleUnavailableError) as e:
            return False, e.message, None
        return True, msg, txn

    @staticmethod
    def checkout(vehicle_id: str, customer_id: str, days, agency: Optional[RentalAgency] = None):
        """Like rent(), but lets InvalidArgumentError / VehicleUnavailableError propagate."""
        ag = common.resolve_agency(agency)
        n = parse_days(days)
        customer = CustomerService.get_or_create(customer_id, agency=ag)
        txn = ag.rent_vehicle(vehicle_id, customer, n)
        return RENTED_MSG.format(model=txn.model, cost=txn.total_cost), txn

    @staticmethod
    def return_vehicle(vehicle_id: str, agency: Optional[RentalAgency] = None):
        """
        Returns:
            (ok: bool, message: str, vehicle: Optional[VehicleBase])
        """
        ag = common.resolve_agency(agency)
        try:
            vehicle = ag.return_vehicle(vehicle_id)
        except InvalidReturnError as e:
            return False, e.message, None
        return True, RETURNED_MSG.format(model=vehicle.model), vehicle

    @staticmethod
    def transactions(agency: Optional[RentalAgency] = None):
        return common.resolve_agency(agency).get_transactions()

    @staticmethod
    def transaction_lines(agency: Optional[RentalAgency] = None) -> list[str]:
        """The log rendered one `vehicleId=... cost=...` line per rental."""
        return [str(t) for t in RentalService.transactions(agency)]
