"""Statistical and odds helper functions."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np


def kelly_criterion(
    win_prob: float, decimal_odds: float, fraction: float = 0.25
) -> float:
    """Compute fractional Kelly criterion bet size.

    f* = fraction * (b*p - q) / b
    where b = decimal_odds - 1, p = win_prob, q = 1 - p.

    Returns fraction of bankroll to bet (0 if no edge). The result is not
    capped at 1; callers clamp.
    """
    b = decimal_odds - 1
    if b <= 0:
        return 0.0
    q = 1 - win_prob
    edge = b * win_prob - q
    if edge <= 0:
        return 0.0
    return fraction * edge / b


def implied_probability(decimal_odds: float) -> float:
    """Break-even win probability for decimal odds (1 / odds)."""
    if decimal_odds <= 0:
        return 0.0
    return 1 / decimal_odds


def population_moments(values: Sequence[float]) -> tuple[float, float, float]:
    """Return (mean, variance, std) using the population (1/N) convention.

    Empty input yields zeros.
    """
    if len(values) == 0:
        return 0.0, 0.0, 0.0
    arr = np.asarray(values, dtype=float)
    mean = float(arr.mean())
    variance = float(arr.var())  # ddof=0
    # Float noise can leave a tiny positive variance for identical values.
    if math.isclose(variance, 0.0, abs_tol=1e-12):
        variance = 0.0
    std = math.sqrt(variance)
    return mean, variance, std


def is_finite_number(value: float) -> bool:
    """True for real, finite numbers (rejects NaN and +/-inf)."""
    try:
        return math.isfinite(value)
    except TypeError:
        return False
