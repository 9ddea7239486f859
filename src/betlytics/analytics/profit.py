"""Profit factor and average hold time."""

from __future__ import annotations

import math
from collections.abc import Iterable

from betlytics.analytics.wager import PortfolioSnapshot, Wager, WagerStatus, as_snapshot
from betlytics.constants import HOLD_TIME_PLACES
from betlytics.utils.dates import fractional_days_between
from betlytics.utils.money import money_sum, round_half_up


def calculate_profit_factor(wagers: Iterable[Wager] | PortfolioSnapshot) -> float:
    """Gross winnings over gross losses.

    Returns ``math.inf`` when there are wins but no losses and ``0.0`` when
    there is neither. Finite values are rounded to 2 decimals.
    """
    groups = as_snapshot(wagers).by_status
    total_wins = money_sum(abs(w.profit) for w in groups[WagerStatus.WON])
    total_losses = money_sum(abs(w.profit) for w in groups[WagerStatus.LOST])

    if total_losses == 0:
        return math.inf if total_wins > 0 else 0.0
    return round_half_up(total_wins / total_losses)


def calculate_avg_hold_time(wagers: Iterable[Wager] | PortfolioSnapshot) -> float:
    """Mean days between placement and settlement of won/lost wagers.

    Wagers missing either timestamp are left out rather than counted as
    zero. No eligible wagers gives 0.0.
    """
    holds = [
        fractional_days_between(w.created_at, w.settled_at)
        for w in as_snapshot(wagers).settled()
        if w.created_at is not None and w.settled_at is not None
    ]
    if not holds:
        return 0.0
    return round_half_up(sum(holds) / len(holds), HOLD_TIME_PLACES)
