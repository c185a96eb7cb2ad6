# errors.py
# Error kinds raised by the sizing, power and quoting calculators.

import math


class EstimatorError(Exception):
    """Base class for every error the estimator core raises."""


class InvalidInput(EstimatorError, ValueError):
    """A value is missing, non-numeric, out of range or not a known option."""


class NotFound(EstimatorError, LookupError):
    """A referenced id does not exist (quote item, catalog product)."""


def require_number(value, name: str, minimum=None, exclusive=False) -> float:
    """
    Coerce ``value`` to a finite float or raise InvalidInput.

    ``minimum`` bounds the value from below; with ``exclusive`` the bound
    itself is rejected too (strictly positive sizes, safety factors).
    """
    if value is None or isinstance(value, bool):
        raise InvalidInput(f"{name} is required and must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be a number, got {value!r}") from None
    if math.isnan(number) or math.isinf(number):
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    if minimum is not None:
        if exclusive and number <= minimum:
            raise InvalidInput(f"{name} must be greater than {minimum:g}, got {number:g}")
        if not exclusive and number < minimum:
            raise InvalidInput(f"{name} must be at least {minimum:g}, got {number:g}")
    return number
