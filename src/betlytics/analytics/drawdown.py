"""Peak-to-trough drawdown over the equity curve.

Equity starts at 0 and accumulates the profit of each won/lost wager in
date order. Money is accumulated as cent-quantized ``Decimal`` so the
running peak does not drift over long histories.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from betlytics.analytics.wager import PortfolioSnapshot, Wager, as_snapshot
from betlytics.utils.logging import get_logger
from betlytics.utils.money import round_half_up, to_money

log = get_logger(__name__)

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class DrawdownResult:
    """Largest peak-to-trough decline.

    ``trough_equity`` is the equity at the step that set ``max_drawdown``,
    measured against the running peak at that step; it is not the global
    minimum of the curve. ``peak_equity`` is that running peak.
    """

    max_drawdown: float = 0.0
    max_drawdown_percentage: float = 0.0
    peak_equity: float = 0.0
    trough_equity: float = 0.0


@dataclass(frozen=True)
class EquityPoint:
    date: dt.date
    profit: float
    equity: float
    peak: float
    drawdown: float


def _walk(ordered: PortfolioSnapshot) -> Iterable[tuple[Wager, Decimal, Decimal, Decimal]]:
    equity = peak = ZERO
    for wager in ordered:
        equity += to_money(wager.profit)
        peak = max(peak, equity)
        yield wager, equity, peak, peak - equity


def equity_curve(wagers: Iterable[Wager] | PortfolioSnapshot) -> list[EquityPoint]:
    """Cumulative profit after each won/lost wager, in date order."""
    ordered = as_snapshot(wagers).settled().chronological()
    return [
        EquityPoint(
            date=wager.date,
            profit=float(to_money(wager.profit)),
            equity=float(equity),
            peak=float(peak),
            drawdown=float(drawdown),
        )
        for wager, equity, peak, drawdown in _walk(ordered)
    ]


def calculate_max_drawdown(wagers: Iterable[Wager] | PortfolioSnapshot) -> DrawdownResult:
    """Maximum drawdown of the equity curve.

    The percentage is relative to the peak in force when the maximum
    drawdown occurred, not the final peak, and is 0 when that peak is 0
    (the curve never rose above its starting point).
    """
    ordered = as_snapshot(wagers).settled().chronological()
    if not ordered:
        return DrawdownResult()

    max_dd = ZERO
    peak_at_max = ZERO
    trough = ZERO
    running_peak = ZERO
    for _, equity, peak, drawdown in _walk(ordered):
        running_peak = peak
        if drawdown > max_dd:
            max_dd = drawdown
            peak_at_max = peak
            trough = equity

    if max_dd == ZERO:
        peak_at_max = running_peak

    pct = max_dd / peak_at_max * 100 if peak_at_max > 0 else ZERO
    log.debug("drawdown_calculated", wagers=len(ordered), max_drawdown=str(max_dd))
    return DrawdownResult(
        max_drawdown=round_half_up(max_dd),
        max_drawdown_percentage=round_half_up(pct),
        peak_equity=round_half_up(peak_at_max),
        trough_equity=round_half_up(trough),
    )
