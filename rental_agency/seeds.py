"""
seeds.py
--------
Demo data and the end-to-end driver flow for the rental agency.

Usage:
    $ python -m rental_agency.seeds
or
    $ rental-agency demo
"""

from typing import Callable, Optional

from rental_agency.models.agency import RentalAgency
from rental_agency.models.customer import Customer
from rental_agency.models.vehicle import Car, Motorcycle, Truck

DEMO_CUSTOMER = ("22123273", "Tsikata Lewis")


def seed_demo_fleet(agency: RentalAgency) -> None:
    """Add the three demo vehicles (one of each type) to `agency`."""
    agency.add_vehicle(Car("GW-23", "Toyota Corolla", 50.0, True))
    agency.add_vehicle(Motorcycle("GA-42", "Royal FZ", 30.0, False))
    agency.add_vehicle(Truck("VR-64", "Ford F-150", 70.0, 1000))


def run_demo(agency: Optional[RentalAgency] = None, echo: Callable[[str], None] = print) -> RentalAgency:
    """
    Seed a fresh agency, rent the car for 5 days and the motorcycle for 3,
    return both, then print the transaction log.
    """
    from rental_agency.services.rental_service import RentalService

    agency = agency if agency is not None else RentalAgency("demo")
    seed_demo_fleet(agency)
    customer = agency.register_customer(Customer(*DEMO_CUSTOMER))

    for vid, days in (("GW-23", 5), ("GA-42", 3)):
        _, msg, _ = RentalService.rent(vid, customer.customer_id, days, agency=agency)
        echo(msg)
    for vid in ("GW-23", "GA-42"):
        _, msg, _ = RentalService.return_vehicle(vid, agency=agency)
        echo(msg)

    echo("Rental Transactions:")
    for line in RentalService.transaction_lines(agency):
        echo(line)
    return agency


def main():
    run_demo()


if __name__ == "__main__":
    main()
