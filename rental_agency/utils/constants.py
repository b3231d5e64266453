# rental_agency/utils/constants.py

"""
Global constants for vehicle types, statuses and pricing.
These constants are imported by both models and services.
"""


class VehicleType:
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    TRUCK = "truck"


class VehicleStatus:
    AVAILABLE = "available"
    RENTED = "rented"


# --- Pricing ---
AC_SURCHARGE = 50.0          # flat, per rental
SIDECAR_MULTIPLIER = 1.1
LOAD_CAPACITY_RATE = 10.0    # per unit of load capacity, per rental

# --- Output ---
TRANSACTION_FMT = "vehicleId={vehicle_id} customerId={customer_id} days={days} cost={cost}"
RENTED_MSG = "Vehicle rented: {model} | Rental cost: {cost}"
RETURNED_MSG = "Vehicle returned: {model}"

# --- Misc ---
ALLOWED_TYPES = {VehicleType.CAR, VehicleType.MOTORCYCLE, VehicleType.TRUCK}
TRUTHY = {"1", "true", "yes", "y", "on"}
FALSY = {"0", "false", "no", "n", "off", ""}
