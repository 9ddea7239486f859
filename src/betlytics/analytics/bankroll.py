"""Bankroll history and staking totals.

Replays every non-pending wager onto a starting bankroll and totals the
amount staked over trailing calendar windows.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from dataclasses import dataclass, field

from betlytics.analytics.validation import check_non_negative
from betlytics.analytics.wager import PortfolioSnapshot, Wager, as_snapshot
from betlytics.constants import STAKING_WINDOW_MONTH, STAKING_WINDOW_WEEK
from betlytics.utils.logging import get_logger
from betlytics.utils.money import money_sum, round_half_up, to_money

log = get_logger(__name__)


@dataclass(frozen=True)
class BankrollPoint:
    date: dt.date | None  # None for the starting point
    bankroll: float


@dataclass(frozen=True)
class BankrollHistory:
    """Bankroll after each non-pending wager, in date order.

    ``points`` starts with the starting bankroll, so it always has one
    more entry than there are non-pending wagers.
    """

    starting_bankroll: float
    current_bankroll: float
    growth: float
    growth_percentage: float  # growth / starting_bankroll * 100
    points: tuple[BankrollPoint, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class StakingTotals:
    """Amount staked over the trailing windows ending on ``as_of``."""

    as_of: dt.date
    last_7_days: float
    last_30_days: float


def bankroll_history(
    wagers: Iterable[Wager] | PortfolioSnapshot,
    starting_bankroll: float,
) -> BankrollHistory:
    """Replay realized profits onto ``starting_bankroll``.

    Void and cashout results are applied along with won and lost ones;
    pending wagers are skipped. Growth percentage is 0 when the starting
    bankroll is 0.
    """
    start = to_money(check_non_negative(starting_bankroll, "starting_bankroll"))
    ordered = as_snapshot(wagers).terminal().chronological()

    running = start
    points = [BankrollPoint(None, float(start))]
    for wager in ordered:
        running += to_money(wager.profit)
        points.append(BankrollPoint(wager.date, float(running)))

    growth = running - start
    pct = growth / start * 100 if start > 0 else 0
    log.debug("bankroll_replayed", wagers=len(ordered), current=str(running))
    return BankrollHistory(
        starting_bankroll=float(start),
        current_bankroll=float(running),
        growth=float(growth),
        growth_percentage=round_half_up(pct),
        points=tuple(points),
    )


def _staked_within(snapshot: PortfolioSnapshot, as_of: dt.date, days: int) -> float:
    first = as_of - dt.timedelta(days=days - 1)
    return float(money_sum(w.stake for w in snapshot if first <= w.date <= as_of))


def staking_totals(
    wagers: Iterable[Wager] | PortfolioSnapshot,
    as_of: dt.date | None = None,
) -> StakingTotals:
    """Total stake of wagers dated in the last 7 and 30 days.

    A window of N days covers ``as_of`` and the N - 1 days before it.
    Every status counts, pending included: this is money put at risk, not
    realized results. ``as_of`` defaults to today.
    """
    as_of = as_of or dt.date.today()
    snapshot = as_snapshot(wagers)
    return StakingTotals(
        as_of=as_of,
        last_7_days=_staked_within(snapshot, as_of, STAKING_WINDOW_WEEK),
        last_30_days=_staked_within(snapshot, as_of, STAKING_WINDOW_MONTH),
    )
