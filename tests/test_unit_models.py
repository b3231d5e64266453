"""
Model-level validation: ids are fixed, names/models must be non-empty,
rates positive, and a rejected value leaves the object unchanged.
"""

import pytest

from rental_agency.exceptions import InvalidArgumentError
from rental_agency.models.customer import Customer
from rental_agency.models.transaction import RentalTransaction
from rental_agency.models.vehicle import Car, Motorcycle, Truck


def test_new_vehicle_is_available():
    v = Car("GW-23", "Toyota Corolla", 50.0, True)
    assert v.available is True
    assert v.is_available_for_rental()
    assert v.status == "available"


def test_vehicle_id_is_immutable():
    v = Motorcycle("GA-42", "Royal FZ", 30.0, False)
    with pytest.raises(AttributeError):
        v.vehicle_id = "XX-00"
    assert v.vehicle_id == "GA-42"


@pytest.mark.parametrize("bad", ["", "   ", None])
def test_set_model_rejects_empty(bad):
    v = Car("GW-23", "Toyota Corolla", 50.0, True)
    with pytest.raises(InvalidArgumentError):
        v.set_model(bad)
    assert v.model == "Toyota Corolla"


@pytest.mark.parametrize("bad", [0, -5, "abc", None])
def test_set_base_rate_rejects_non_positive(bad):
    v = Car("GW-23", "Toyota Corolla", 50.0, True)
    with pytest.raises(InvalidArgumentError):
        v.set_base_rate(bad)
    assert v.base_rate == 50.0


def test_setters_update_values():
    v = Truck("VR-64", "Ford F-150", 70.0, 1000)
    v.set_model("Ford F-250")
    v.set_base_rate(80)
    assert v.model == "Ford F-250"
    assert v.base_rate == 80.0
    assert v.calculate_rental_cost(1) == 10080.0


def test_direct_assignment_is_validated_too():
    v = Car("GW-23", "Toyota Corolla", 50.0, True)
    with pytest.raises(InvalidArgumentError):
        v.base_rate = -1


def test_truck_load_capacity_is_validated_on_assignment():
    t = Truck("VR-64", "Ford F-150", 70.0, 1000)
    with pytest.raises(InvalidArgumentError):
        t.load_capacity = -5000
    assert t.load_capacity == 1000.0
    assert t.calculate_rental_cost(1) == 10070.0


@pytest.mark.parametrize("make", [
    lambda flag: Car("C", "Civic", 50.0, flag),
    lambda flag: Motorcycle("M", "Ural", 30.0, flag),
])
@pytest.mark.parametrize("flag", ["no", "yes", 1, None])
def test_variant_flags_must_be_booleans(make, flag):
    with pytest.raises(InvalidArgumentError):
        make(flag)


def test_variant_flag_reassignment_is_validated():
    c = Car("C", "Civic", 50.0, False)
    with pytest.raises(InvalidArgumentError):
        c.air_conditioning = "no"
    assert c.calculate_rental_cost(1) == 50.0
    m = Motorcycle("M", "Ural", 30.0, False)
    m.sidecar = True
    assert m.calculate_rental_cost(1) == 33.0


def test_construction_validates():
    with pytest.raises(InvalidArgumentError):
        Car("GW-23", "", 50.0, True)
    with pytest.raises(InvalidArgumentError):
        Motorcycle("GA-42", "Royal FZ", 0, False)
    with pytest.raises(InvalidArgumentError):
        Truck("VR-64", "Ford F-150", 70.0, -1)


def test_to_dict_carries_type_and_variant_attribute():
    d = Truck("VR-64", "Ford F-150", 70.0, 1000).to_dict()
    assert d["type"] == "truck"
    assert d["load_capacity"] == 1000.0
    assert d["status"] == "available"


def test_customer_history_appends_without_checks():
    c = Customer("22123273", "Tsikata Lewis")
    c.add_rental("GW-23")
    c.add_rental("GW-23")
    c.add_rental("nope")
    assert c.rental_history == ["GW-23", "GW-23", "nope"]


def test_customer_history_cannot_be_replaced():
    c = Customer("22123273", "Tsikata Lewis")
    c.add_rental("GW-23")
    with pytest.raises(AttributeError):
        c.rental_history = []
    assert c.rental_history == ["GW-23"]


def test_customer_set_name():
    c = Customer("22123273", "Tsikata Lewis")
    c.set_name("T. Lewis")
    assert c.name == "T. Lewis"
    with pytest.raises(InvalidArgumentError):
        c.set_name("")
    assert c.name == "T. Lewis"
    with pytest.raises(AttributeError):
        c.customer_id = "other"


def test_transaction_is_frozen_and_formats_one_line():
    t = RentalTransaction("GW-23", "22123273", 5, 300.0)
    assert str(t) == "vehicleId=GW-23 customerId=22123273 days=5 cost=300.0"
    with pytest.raises(AttributeError):
        t.total_cost = 0.0
