from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from rental_agency.exceptions import InvalidArgumentError, VehicleNotFoundError
from rental_agency.services import common
from rental_agency.services.common import norm_type, parse_flag

if TYPE_CHECKING:
    from rental_agency.models.agency import RentalAgency  # noqa: F401


class VehicleService:
    """Vehicle catalogue: create, look up, filter."""

    @staticmethod
    def admin_create_vehicle(payload: dict, agency: Optional["RentalAgency"] = None):
        """
        Build a vehicle from `payload` and add it to the fleet.

        Returns:
            (ok: bool, message: str, vehicle: Optional[VehicleBase])
        """
        ag = common.resolve_agency(agency)
        try:
            vehicle = common.vehicle_from_dict(payload)
        except InvalidArgumentError as e:
            return False, e.message, None
        ag.add_vehicle(vehicle)
        return True, "Vehicle created", vehicle

    @staticmethod
    def get_vehicle(vid: str, agency: Optional["RentalAgency"] = None):
        """Return the vehicle with this ID or raise VehicleNotFoundError."""
        v = common.resolve_agency(agency).find_vehicle(vid)
        if v is None:
            raise VehicleNotFoundError(f"Error: vehicle with ID '{vid}' not found")
        return v

    @staticmethod
    def all_vehicles(agency: Optional["RentalAgency"] = None):
        ag = common.resolve_agency(agency)
        return list(ag.fleet)

    @staticmethod
    def filter_vehicles(vtype=None, available=None, *, agency=None):
        """
        Filter the fleet by type and availability (linear scan).
        - Empty filters are ignored.
        - `available` accepts booleans or yes/no strings.
        """
        res = VehicleService.all_vehicles(agency)

        if vtype:
            vt = norm_type(vtype)
            res = [v for v in res if v.vehicle_type == vt]

        if available not in (None, ""):
            want = parse_flag(available, "Available")
            res = [v for v in res if v.is_available_for_rental() == want]

        return res
