import os

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .controllers.rentals import bp as rentals_bp
from .controllers.vehicles import bp as vehicles_bp
from .controllers.views import bp as views_bp
from .exceptions import (
    AgencyError,
    CustomerNotFoundError,
    InvalidArgumentError,
    InvalidReturnError,
    VehicleNotFoundError,
    VehicleUnavailableError,
)
from .models.agency import RentalAgency

ERROR_STATUS = {
    InvalidArgumentError: 400,
    VehicleNotFoundError: 404,
    CustomerNotFoundError: 404,
    VehicleUnavailableError: 409,
    InvalidReturnError: 409,
}


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(
        SECRET_KEY="dev-secret-change-me",
        SEED_DEMO_FLEET=False,
    )
    app.config.from_prefixed_env("RENTAL_AGENCY")
    if test_config:
        app.config.update(test_config)

    agency = RentalAgency.instance()
    # seeding is skipped in test environments
    if app.config["SEED_DEMO_FLEET"] and os.getenv("APP_ENV") != "test" and not agency.fleet:
        from .seeds import seed_demo_fleet
        seed_demo_fleet(agency)
        app.logger.info("Seeded demo fleet (%d vehicles)", len(agency.fleet))

    app.register_blueprint(views_bp)
    app.register_blueprint(vehicles_bp)
    app.register_blueprint(rentals_bp)
    register_error_handlers(app)

    return app


def register_error_handlers(app):
    @app.errorhandler(AgencyError)
    def handle_agency_error(e):
        status = ERROR_STATUS.get(type(e), 400)
        app.logger.warning("%s -> %d: %s", type(e).__name__, status, e.message)
        return jsonify({"error": e.message}), status

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description}), e.code
