"""Variance, standard deviation and a per-wager Sharpe-style ratio."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from betlytics.analytics.wager import PortfolioSnapshot, Wager, as_snapshot
from betlytics.utils.money import round_half_up
from betlytics.utils.stats import population_moments


@dataclass(frozen=True)
class RiskResult:
    variance: float = 0.0
    standard_deviation: float = 0.0
    risk_ratio: float = 0.0  # mean / std per wager, not annualized


def calculate_variance(wagers: Iterable[Wager] | PortfolioSnapshot) -> RiskResult:
    """Dispersion of per-wager profit over won/lost wagers.

    Uses population variance. Identical profits (including a single wager)
    give zero deviation and a zero ratio.
    """
    profits = [w.profit for w in as_snapshot(wagers).settled()]
    if not profits:
        return RiskResult()

    mean, variance, std = population_moments(profits)
    ratio = mean / std if std > 0 else 0.0
    return RiskResult(
        variance=round_half_up(variance),
        standard_deviation=round_half_up(std),
        risk_ratio=round_half_up(ratio),
    )
