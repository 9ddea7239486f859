"""Full performance report: every calculator over one snapshot."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from dataclasses import dataclass

from betlytics.analytics.drawdown import DrawdownResult, calculate_max_drawdown
from betlytics.analytics.profit import calculate_avg_hold_time, calculate_profit_factor
from betlytics.analytics.risk import RiskResult, calculate_variance
from betlytics.analytics.streaks import StreakResult, calculate_streaks
from betlytics.analytics.summary import PortfolioStats, calculate_portfolio_stats
from betlytics.analytics.wager import PortfolioSnapshot, Wager, as_snapshot
from betlytics.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class PerformanceReport:
    start: dt.date | None
    end: dt.date | None
    stats: PortfolioStats
    streaks: StreakResult
    drawdown: DrawdownResult
    risk: RiskResult
    profit_factor: float
    avg_hold_time_days: float


def build_report(
    wagers: Iterable[Wager] | PortfolioSnapshot,
    start: dt.date | None = None,
    end: dt.date | None = None,
) -> PerformanceReport:
    """Run all calculators on the same (optionally date-filtered) snapshot."""
    snapshot = as_snapshot(wagers).between(start, end)

    report = PerformanceReport(
        start=start,
        end=end,
        stats=calculate_portfolio_stats(snapshot),
        streaks=calculate_streaks(snapshot),
        drawdown=calculate_max_drawdown(snapshot),
        risk=calculate_variance(snapshot),
        profit_factor=calculate_profit_factor(snapshot),
        avg_hold_time_days=calculate_avg_hold_time(snapshot),
    )
    log.info(
        "performance_report",
        wagers=len(snapshot),
        net_profit=report.stats.net_profit,
        roi=report.stats.roi,
        max_drawdown=report.drawdown.max_drawdown,
    )
    return report
