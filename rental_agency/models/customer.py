from dataclasses import dataclass, field

from rental_agency.utils.validators import require_text


@dataclass
class Customer:
    """
    A renter. The agency appends to `rental_history` on every successful
    rental; the customer itself never checks that the ids are real.
    """
    customer_id: str
    name: str
    rental_history: list[str] = field(default_factory=list)

    def __setattr__(self, name, value):
        if name == "customer_id":
            if "customer_id" in self.__dict__:
                raise AttributeError("customer_id cannot be changed")
            value = require_text(value, "Customer ID")
        elif name == "name":
            value = require_text(value, "Name")
        elif name == "rental_history" and "rental_history" in self.__dict__:
            raise AttributeError("rental_history is append-only")
        super().__setattr__(name, value)

    def set_name(self, name: str) -> None:
        self.name = name

    def add_rental(self, vehicle_id: str) -> None:
        self.rental_history.append(vehicle_id)

    def to_dict(self) -> dict:
        return {
            "customer_id": self.customer_id,
            "name": self.name,
            "rental_history": list(self.rental_history),
        }
