from flask import Blueprint, current_app, jsonify, request

from ..exceptions import InvalidArgumentError
from ..services.vehicle_service import VehicleService

bp = Blueprint("vehicles", __name__, url_prefix="/vehicles")


@bp.get("")
def list_vehicles():
    """List the fleet, optionally filtered by ?type= and ?available=."""
    q = {k: (v or "").strip() for k, v in request.args.items()}
    vehicles = VehicleService.filter_vehicles(vtype=q.get("type"), available=q.get("available"))
    return jsonify([v.to_dict() for v in vehicles])


@bp.get("/<vid>")
def vehicle_detail(vid):
    v = VehicleService.get_vehicle(vid)
    return jsonify(v.to_dict())


@bp.post("")
def add_vehicle():
    """Add a vehicle from a JSON body: {type, vehicle_id, model, rate, <variant attribute>}."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidArgumentError("Expected a JSON object")

    ok, msg, vehicle = VehicleService.admin_create_vehicle(data)
    if not ok:
        raise InvalidArgumentError(msg)
    current_app.logger.info("Vehicle added: %s (%s)", vehicle.vehicle_id, vehicle.vehicle_type)
    return jsonify(vehicle.to_dict()), 201
