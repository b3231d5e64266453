"""
RentalService and CustomerService wrap the agency: domain errors come back
as (False, message, None) and unknown customer ids are registered on the fly.
"""

import pytest

from rental_agency.exceptions import CustomerNotFoundError, VehicleUnavailableError
from rental_agency.models.vehicle import Car
from rental_agency.services.customer_service import CustomerService
from rental_agency.services.rental_service import RentalService


def test_rent_reports_model_and_cost(agency):
    ok, msg, txn = RentalService.rent("GW-23", "22123273", "5", agency=agency)
    assert ok
    assert msg == "Vehicle rented: Toyota Corolla | Rental cost: 300.0"
    assert txn.total_cost == 300.0
    assert agency.get_customer("22123273").rental_history == ["GW-23"]


def test_rent_failures_are_reported_not_raised(agency):
    RentalService.rent("GW-23", "c1", 1, agency=agency)
    ok, msg, txn = RentalService.rent("GW-23", "c1", 1, agency=agency)
    assert (ok, txn) == (False, None)
    assert msg == VehicleUnavailableError.default_message

    ok, msg, _ = RentalService.rent("GA-42", "c1", "two", agency=agency)
    assert not ok and "positive integer" in msg
    assert len(RentalService.transactions(agency)) == 1


def test_checkout_raises(agency):
    with pytest.raises(VehicleUnavailableError):
        RentalService.checkout("NOPE", "c1", 1, agency=agency)


def test_return_vehicle_messages(agency):
    RentalService.rent("VR-64", "c1", 1, agency=agency)
    assert RentalService.return_vehicle("VR-64", agency=agency)[:2] == (True, "Vehicle returned: Ford F-150")
    ok, msg, vehicle = RentalService.return_vehicle("VR-64", agency=agency)
    assert not ok and vehicle is None
    assert "not rented" in msg


def test_transaction_lines(agency):
    RentalService.rent("GW-23", "22123273", 5, agency=agency)
    RentalService.rent("GA-42", "22123273", 3, agency=agency)
    assert RentalService.transaction_lines(agency) == [
        "vehicleId=GW-23 customerId=22123273 days=5 cost=300.0",
        "vehicleId=GA-42 customerId=22123273 days=3 cost=90.0",
    ]


def test_customer_register_and_lookup(agency):
    ok, msg, c = CustomerService.register("22123273", "Tsikata Lewis", agency=agency)
    assert ok, msg
    assert CustomerService.get_customer("22123273", agency=agency) is c

    ok, msg, _ = CustomerService.register("22123273", "Someone", agency=agency)
    assert not ok and msg == "Customer exists"
    ok, msg, _ = CustomerService.register("c9", "", agency=agency)
    assert not ok

    with pytest.raises(CustomerNotFoundError):
        CustomerService.get_customer("c9", agency=agency)


def test_rent_uses_registered_customer(agency):
    CustomerService.register("22123273", "Tsikata Lewis", agency=agency)
    RentalService.rent("VR-64", "22123273", 1, agency=agency)
    assert agency.get_customer("22123273").name == "Tsikata Lewis"


def test_rentals_for_customer(agency):
    RentalService.rent("GW-23", "a", 1, agency=agency)
    RentalService.rent("GA-42", "b", 2, agency=agency)
    rows = CustomerService.rentals_for_customer("b", agency=agency)
    assert rows == [{
        "vehicle_id": "GA-42",
        "customer_id": "b",
        "days_rented": 2,
        "total_cost": 60.0,
        "model": "Royal FZ",
        "type": "motorcycle",
    }]


def test_duplicate_ids_report_the_vehicle_actually_rented(agency):
    agency.add_vehicle(Car("GW-23", "Second Corolla", 40.0, False))
    _, first, _ = RentalService.rent("GW-23", "a", 1, agency=agency)
    ok, second, txn = RentalService.rent("GW-23", "b", 1, agency=agency)
    assert first == "Vehicle rented: Toyota Corolla | Rental cost: 100.0"
    assert ok and second == "Vehicle rented: Second Corolla | Rental cost: 40.0"

    rows = CustomerService.rentals_for_customer("b", agency=agency)
    assert [(r["model"], r["type"], r["total_cost"]) for r in rows] == [("Second Corolla", "car", 40.0)]


def test_rows_keep_the_model_at_rental_time(agency):
    RentalService.rent("VR-64", "a", 1, agency=agency)
    agency.find_vehicle("VR-64").set_model("Ford F-250")
    assert CustomerService.rentals_for_customer("a", agency=agency)[0]["model"] == "Ford F-150"
