"""Fixed-point helpers for monetary aggregation.

Profits arrive as floats from the store. Summing them as floats drifts
over long histories, so aggregation converts each value to a cent-quantized
``Decimal`` first and only converts back to ``float`` at the output edge.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_money(value: float | int | Decimal) -> Decimal:
    """Convert a float amount to a cent-quantized Decimal.

    Goes through ``repr`` so that ``0.1`` becomes ``Decimal("0.10")`` rather
    than the binary expansion of the float.
    """
    if isinstance(value, Decimal):
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    return Decimal(repr(float(value))).quantize(CENT, rounding=ROUND_HALF_UP)


def money_sum(values: Iterable[float | int | Decimal]) -> Decimal:
    """Exact cent sum of monetary values."""
    return sum((to_money(v) for v in values), Decimal("0.00"))


def round_half_up(value: float | Decimal, places: int = 2) -> float:
    """Round to ``places`` decimals, halves away from zero, as a float.

    Built-in ``round`` works on the binary float, so
    ``round(2.675, 2) == 2.67``; reports expect ``2.68``.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    dec = value if isinstance(value, Decimal) else Decimal(repr(float(value)))
    return float(dec.quantize(quantum, rounding=ROUND_HALF_UP))
