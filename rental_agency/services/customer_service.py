from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from rental_agency.exceptions import CustomerNotFoundError, InvalidArgumentError
from rental_agency.models.customer import Customer
from rental_agency.services import common

if TYPE_CHECKING:
    from rental_agency.models.agency import RentalAgency  # noqa: F401


class CustomerService:
    """Customer directory operations and per-customer rentals view."""

    @staticmethod
    def register(customer_id: str, name: str, agency: Optional["RentalAgency"] = None):
        """
        Returns:
            (ok: bool, message: str, customer: Optional[Customer])
        """
        ag = common.resolve_agency(agency)
        try:
            customer = Customer(customer_id, name)
        except InvalidArgumentError as e:
            return False, e.message, None
        if ag.get_customer(customer.customer_id) is not None:
            return False, "Customer exists", None
        ag.register_customer(customer)
        return True, "Customer created", customer

    @staticmethod
    def get_customer(customer_id: str, agency: Optional["RentalAgency"] = None) -> Customer:
        c = common.resolve_agency(agency).get_customer(customer_id)
        if c is None:
            raise CustomerNotFoundError(f"Error: customer with ID '{customer_id}' not found")
        return c

    @staticmethod
    def get_or_create(customer_id: str, agency: Optional["RentalAgency"] = None) -> Customer:
        """Unknown ids are registered with the id as display name."""
        return common.resolve_agency(agency).get_or_register_customer(customer_id)

    @staticmethod
    def rentals_for_customer(customer_id: str, agency: Optional["RentalAgency"] = None):
        """Return this customer's transactions with the rented model and type."""
        ag = common.resolve_agency(agency)
        out = []
        for t in ag.get_transactions():
            if t.customer_id != customer_id:
                continue
            row = t.to_dict()
            row["type"] = row.pop("vehicle_type")
            out.append(row)
        return out
