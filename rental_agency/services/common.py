"""Shared service helpers and factories."""

from typing import Optional

from rental_agency.exceptions import InvalidArgumentError
from rental_agency.models.agency import RentalAgency
from rental_agency.models.vehicle import Car, Motorcycle, Truck, VehicleBase
from rental_agency.utils.constants import ALLOWED_TYPES, FALSY, TRUTHY, VehicleType

TYPE_ALIASES = {"motorbike": VehicleType.MOTORCYCLE}

# payload key holding each type's extra attribute
VARIANT_ATTRS = {
    VehicleType.CAR: "air_conditioning",
    VehicleType.MOTORCYCLE: "sidecar",
    VehicleType.TRUCK: "load_capacity",
}


def _agency() -> RentalAgency:
    """Get the singleton agency instance."""
    return RentalAgency.instance()


def resolve_agency(agency: Optional[RentalAgency] = None) -> RentalAgency:
    """Prefer an injected agency (CLI, tests), else the shared one."""
    return agency if agency is not None else _agency()


# -------- validators / normalizers --------
def norm_type(value: Optional[str]) -> str:
    """Normalize vehicle type to lowercase; map aliases; return '' if None."""
    vt = (value or "").strip().lower()
    return TYPE_ALIASES.get(vt, vt)


def parse_flag(value, label: str) -> bool:
    """Accept real booleans or yes/no style strings."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    s = str(value).strip().lower()
    if s in TRUTHY:
        return True
    if s in FALSY:
        return False
    raise InvalidArgumentError(f"{label} must be true or false, got {value!r}")


def parse_days(value) -> int:
    """Parse a rental length from an int or a decimal string."""
    if isinstance(value, bool):
        raise InvalidArgumentError("Rental days must be a positive integer")
    if isinstance(value, int):
        days = value
    else:
        try:
            days = int(str(value).strip())
        except (TypeError, ValueError):
            raise InvalidArgumentError("Rental days must be a positive integer") from None
    if days <= 0:
        raise InvalidArgumentError("Rental days must be a positive integer")
    return days


# -------- dict -> rich model mappers --------
def vehicle_from_dict(d: Optional[dict]) -> VehicleBase:
    """
    Build a vehicle from a payload such as
    {"type": "car", "vehicle_id": "GW-23", "model": "Toyota Corolla",
     "rate": 50, "air_conditioning": true}.
    The variant attribute may also be given under the generic key "attr".
    """
    if not d:
        raise InvalidArgumentError("Invalid vehicle data")
    vtype = norm_type(d.get("type"))
    if vtype not in ALLOWED_TYPES:
        raise InvalidArgumentError(
            f"Vehicle type must be one of {', '.join(sorted(ALLOWED_TYPES))}")

    base = dict(
        vehicle_id=d.get("vehicle_id") or d.get("id"),
        model=str(d.get("model") or "").strip(),
        base_rate=d.get("rate", d.get("base_rate")),
    )
    key = VARIANT_ATTRS[vtype]
    attr = d.get(key, d.get("attr"))

    if vtype == VehicleType.MOTORCYCLE:
        return Motorcycle(**base, sidecar=parse_flag(attr, "Sidecar"))
    if vtype == VehicleType.TRUCK:
        return Truck(**base, load_capacity=0.0 if attr is None else attr)
    return Car(**base, air_conditioning=parse_flag(attr, "Air conditioning"))
