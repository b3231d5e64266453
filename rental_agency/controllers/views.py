from flask import Blueprint, jsonify

from ..services.common import _agency

bp = Blueprint("views", __name__)


@bp.get("/")
def home():
    """Liveness check with fleet and log sizes."""
    ag = _agency()
    return jsonify({
        "status": "ok",
        "vehicles": len(ag.fleet),
        "transactions": len(ag.get_transactions()),
    })
