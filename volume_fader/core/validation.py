"""Guards for externally supplied numeric parameters."""

import math
from numbers import Real

from .constants import MAX_VOLUME, MIN_VOLUME
from .exceptions import InvalidArgument

__all__ = [
    "is_number",
    "valid_zero_to_one",
    "valid_positive",
    "check_volume",
    "check_positive",
    "check_callback",
]


def is_number(value) -> bool:
    """Return True for real, non-NaN numbers (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


def valid_zero_to_one(value) -> bool:
    """Check that value is a usable volume level."""
    return is_number(value) and MIN_VOLUME <= value <= MAX_VOLUME


def valid_positive(value) -> bool:
    """Check that value is a usable duration or interval."""
    return is_number(value) and math.isfinite(value) and value > 0


def check_volume(value, name: str = "volume") -> float:
    """Return value as a float, or raise InvalidArgument.

    Args:
        value: Candidate volume level (0.0-1.0)
        name: Parameter name used in the error message
    """
    if not valid_zero_to_one(value):
        raise InvalidArgument(f"{name} must be a number between 0 and 1, got {value!r}")
    return float(value)


def check_positive(value, name: str = "duration") -> float:
    """Return value as a float, or raise InvalidArgument.

    Args:
        value: Candidate duration or interval in milliseconds
        name: Parameter name used in the error message
    """
    if not valid_positive(value):
        raise InvalidArgument(f"{name} must be a finite number > 0, got {value!r}")
    return float(value)


def check_callback(callback, name: str = "callback"):
    """Return callback unchanged if it is None or callable."""
    if callback is not None and not callable(callback):
        raise InvalidArgument(f"{name} must be callable, got {type(callback).__name__}")
    return callback
