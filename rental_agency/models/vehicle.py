from dataclasses import asdict, dataclass, field

from rental_agency.utils.constants import (
    AC_SURCHARGE,
    LOAD_CAPACITY_RATE,
    SIDECAR_MULTIPLIER,
    VehicleStatus,
    VehicleType,
)
from rental_agency.utils.validators import (
    require_days,
    require_flag,
    require_non_negative,
    require_positive_rate,
    require_text,
    round2,
)


@dataclass
class VehicleBase:
    """
    Base vehicle model. `base_rate` is the per-day price before any
    type-specific surcharge. Subclasses adjust the rental cost calculation.

    `vehicle_id` is fixed once assigned; `model`, `base_rate` and the variant
    attributes are validated on every assignment, so a rejected value leaves
    the vehicle untouched.
    """
    vehicle_id: str
    model: str
    base_rate: float
    available: bool = field(default=True, kw_only=True)

    vehicle_type = ""

    def __setattr__(self, name, value):
        if name == "vehicle_id":
            if "vehicle_id" in self.__dict__:
                raise AttributeError("vehicle_id cannot be changed")
            value = require_text(value, "Vehicle ID")
        elif name == "model":
            value = require_text(value, "Model")
        elif name == "base_rate":
            value = require_positive_rate(value)
        elif name == "available":
            value = bool(value)
        elif name == "air_conditioning":
            value = require_flag(value, "Air conditioning")
        elif name == "sidecar":
            value = require_flag(value, "Sidecar")
        elif name == "load_capacity":
            value = require_non_negative(value, "Load capacity")
        super().__setattr__(name, value)

    def set_model(self, model: str) -> None:
        self.model = model

    def set_base_rate(self, base_rate: float) -> None:
        self.base_rate = base_rate

    def set_available(self, available: bool) -> None:
        self.available = available

    @property
    def status(self) -> str:
        return VehicleStatus.AVAILABLE if self.available else VehicleStatus.RENTED

    def _rate_for_days(self, days: int) -> float:
        return self.base_rate * require_days(days)

    def calculate_rental_cost(self, days: int) -> float:
        """
        Total price for renting this vehicle `days` days, rounded to cents.
        Subclasses add their surcharges on top of the base rate.
        """
        return round2(self._rate_for_days(days))

    def is_available_for_rental(self) -> bool:
        return self.available

    def to_dict(self) -> dict:
        d = asdict(self)
        d["type"] = self.vehicle_type
        d["status"] = self.status
        return d


@dataclass
class Car(VehicleBase):
    """
    Cars pay the base rate plus a flat surcharge when air conditioned.
    """
    air_conditioning: bool = False

    vehicle_type = VehicleType.CAR

    def calculate_rental_cost(self, days: int) -> float:
        cost = self._rate_for_days(days)
        if self.air_conditioning:
            cost += AC_SURCHARGE
        return round2(cost)


@dataclass
class Motorcycle(VehicleBase):
    """
    Motorcycles with a sidecar cost 10% more than the base rate.
    """
    sidecar: bool = False

    vehicle_type = VehicleType.MOTORCYCLE

    def calculate_rental_cost(self, days: int) -> float:
        multiplier = SIDECAR_MULTIPLIER if self.sidecar else 1.0
        return round2(self._rate_for_days(days) * multiplier)


@dataclass
class Truck(VehicleBase):
    """
    Trucks add a charge proportional to their load capacity.
    """
    load_capacity: float = 0.0

    vehicle_type = VehicleType.TRUCK

    def calculate_rental_cost(self, days: int) -> float:
        return round2(self._rate_for_days(days) + self.load_capacity * LOAD_CAPACITY_RATE)
