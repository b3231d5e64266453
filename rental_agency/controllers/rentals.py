from flask import Blueprint, current_app, jsonify, request

from ..exceptions import InvalidArgumentError, InvalidReturnError
from ..services.customer_service import CustomerService
from ..services.rental_service import RentalService

bp = Blueprint("rentals", __name__, url_prefix="/")


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidArgumentError("Expected a JSON object")
    return data


@bp.post("/rent")
def rent_vehicle():
    """Rent a vehicle: {vehicle_id, customer_id, days}."""
    form = _json_body()
    msg, txn = RentalService.checkout(
        vehicle_id=form.get("vehicle_id"),
        customer_id=form.get("customer_id"),
        days=form.get("days"),
    )
    current_app.logger.info(msg)
    return jsonify({"message": msg, "transaction": txn.to_dict()}), 201


@bp.post("/return")
def return_vehicle():
    """Return a rented vehicle: {vehicle_id}."""
    vid = str(_json_body().get("vehicle_id") or "").strip()
    if not vid:
        raise InvalidArgumentError("Missing vehicle id")

    ok, msg, vehicle = RentalService.return_vehicle(vid)
    if not ok:
        raise InvalidReturnError(msg)
    current_app.logger.info(msg)
    return jsonify({"message": msg, "vehicle": vehicle.to_dict()})


@bp.get("/transactions")
def list_transactions():
    return jsonify([t.to_dict() for t in RentalService.transactions()])


@bp.post("/customers")
def add_customer():
    """Register a customer: {customer_id, name}."""
    form = _json_body()
    ok, msg, customer = CustomerService.register(form.get("customer_id"), form.get("name"))
    if not ok:
        raise InvalidArgumentError(msg)
    return jsonify(customer.to_dict()), 201


@bp.get("/customers/<cid>")
def customer_detail(cid):
    customer = CustomerService.get_customer(cid)
    out = customer.to_dict()
    out["rentals"] = CustomerService.rentals_for_customer(cid)
    return jsonify(out)
