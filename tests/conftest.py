import os
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
os.environ.setdefault("APP_ENV", "test")

import pytest

from rental_agency import create_app
from rental_agency.models.agency import RentalAgency
from rental_agency.models.customer import Customer
from rental_agency.models.vehicle import Car, Motorcycle, Truck


@pytest.fixture(autouse=True)
def reset_agency_between_tests():
    """The web app and services share one singleton agency; start each test empty."""
    RentalAgency.instance().reset()
    yield
    RentalAgency.instance().reset()


@pytest.fixture
def agency():
    """A private agency holding one vehicle of each type."""
    ag = RentalAgency("test")
    ag.add_vehicle(Car("GW-23", "Toyota Corolla", 50.0, True))
    ag.add_vehicle(Motorcycle("GA-42", "Royal FZ", 30.0, False))
    ag.add_vehicle(Truck("VR-64", "Ford F-150", 70.0, 1000))
    return ag


@pytest.fixture
def customer():
    return Customer("22123273", "Tsikata Lewis")


@pytest.fixture
def client():
    app = create_app({"TESTING": True, "SECRET_KEY": "test"})
    with app.test_client() as c:
        yield c
