"""Argument validators shared by the models. All raise InvalidArgumentError."""

from typing import Optional

from rental_agency.exceptions import InvalidArgumentError


def require_text(value: Optional[str], label: str) -> str:
    """Reject None, non-strings and blank strings."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{label} cannot be null or empty")
    return value


def require_positive_rate(value) -> float:
    """Coerce to float and require > 0."""
    rate = to_float(value, "Base rental rate")
    if rate <= 0:
        raise InvalidArgumentError("Base rental rate must be positive")
    return rate


def require_non_negative(value, label: str) -> float:
    number = to_float(value, label)
    if number < 0:
        raise InvalidArgumentError(f"{label} cannot be negative")
    return number


def require_days(days) -> int:
    """Rental length must be a positive whole number of days."""
    if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
        raise InvalidArgumentError("Rental days must be a positive integer")
    return days


def to_float(value, label: str) -> float:
    # bools are ints in Python; a rate of True is a caller bug
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{label} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"{label} must be a number") from None
    if number != number or number in (float("inf"), float("-inf")):
        raise InvalidArgumentError(f"{label} must be a finite number")
    return number


def round2(x: float) -> float:
    return round(float(x), 2)


def require_flag(value, label: str) -> bool:
    """Only real booleans; a string like "no" would otherwise count as True."""
    if not isinstance(value, bool):
        raise InvalidArgumentError(f"{label} must be true or false")
    return value
