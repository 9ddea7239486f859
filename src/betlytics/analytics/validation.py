"""Boundary checks shared by the calculators."""

from __future__ import annotations

from betlytics.analytics.errors import InvalidInputError
from betlytics.constants import MIN_DECIMAL_ODDS
from betlytics.utils.stats import is_finite_number


def _finite(field: str, value: float) -> float:
    if isinstance(value, bool) or not is_finite_number(value):
        raise InvalidInputError(field, value, "must be a finite number")
    return float(value)


def check_odds(value: float, field: str = "odds") -> float:
    value = _finite(field, value)
    if value < MIN_DECIMAL_ODDS:
        raise InvalidInputError(field, value, f"decimal odds must be >= {MIN_DECIMAL_ODDS}")
    return value


def check_probability(value: float, field: str = "win_probability") -> float:
    value = _finite(field, value)
    if not 0.0 <= value <= 1.0:
        raise InvalidInputError(field, value, "must be within [0, 1]")
    return value


def check_positive(value: float, field: str) -> float:
    value = _finite(field, value)
    if value <= 0:
        raise InvalidInputError(field, value, "must be > 0")
    return value


def check_non_negative(value: float, field: str) -> float:
    value = _finite(field, value)
    if value < 0:
        raise InvalidInputError(field, value, "must be >= 0")
    return value


def check_fraction(value: float, field: str = "fraction") -> float:
    value = _finite(field, value)
    if not 0.0 < value <= 1.0:
        raise InvalidInputError(field, value, "must be within (0, 1]")
    return value


def check_window(value: int, field: str = "window") -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidInputError(field, value, "must be an integer >= 1")
    return value
