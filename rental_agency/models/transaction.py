from dataclasses import asdict, dataclass

from rental_agency.utils.constants import TRANSACTION_FMT


@dataclass(frozen=True)
class RentalTransaction:
    """
    One completed rental. Created by the agency only, never mutated.
    `model` and `vehicle_type` are copied from the rented vehicle at rental
    time; the vehicle itself is referenced by id only.
    """
    vehicle_id: str
    customer_id: str
    days_rented: int
    total_cost: float
    model: str = ""
    vehicle_type: str = ""

    def __str__(self) -> str:
        return TRANSACTION_FMT.format(
            vehicle_id=self.vehicle_id,
            customer_id=self.customer_id,
            days=self.days_rented,
            cost=self.total_cost,
        )

    def to_dict(self) -> dict:
        return asdict(self)
