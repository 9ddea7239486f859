"""Portfolio-level summary and breakdowns.

Answers: How much was staked and won overall? Which odds ranges hit?
How has ROI moved over the last N wagers? How did profit build up week
by week? Which weekdays and sports are profitable?
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
import pandas as pd

from betlytics.analytics.validation import check_window
from betlytics.analytics.wager import PortfolioSnapshot, Wager, WagerStatus, as_snapshot
from betlytics.config import settings
from betlytics.constants import ODDS_BUCKETS
from betlytics.utils.dates import WEEKDAY_NAMES
from betlytics.utils.money import money_sum, round_half_up


@dataclass(frozen=True)
class PortfolioStats:
    """Headline numbers over every wager in the snapshot, any status."""

    total_bets: int = 0
    winning_bets: int = 0
    losing_bets: int = 0
    pending_bets: int = 0
    void_bets: int = 0
    cashout_bets: int = 0
    total_staked: float = 0.0
    net_profit: float = 0.0
    roi: float = 0.0  # net_profit / total_staked * 100
    win_rate: float = 0.0  # winning_bets / total_bets * 100
    avg_odds: float = 0.0


@dataclass(frozen=True)
class OddsBucket:
    label: str
    wins: int
    losses: int
    win_rate: float


@dataclass(frozen=True)
class RoiPoint:
    date: dt.date
    roi: float


@dataclass(frozen=True)
class WeekdayProfit:
    day: str
    profit: float
    avg_profit: float
    count: int


@dataclass(frozen=True)
class WeekProfit:
    week_start: dt.date  # Monday
    profit: float
    cumulative_profit: float
    count: int


@dataclass(frozen=True)
class SportRoi:
    sport: str
    bets: int
    total_staked: float
    net_profit: float
    roi: float


def _pct(numerator: float, denominator: float) -> float:
    return round_half_up(numerator / denominator * 100) if denominator > 0 else 0.0


def calculate_portfolio_stats(wagers: Iterable[Wager] | PortfolioSnapshot) -> PortfolioStats:
    """Counts, stake, profit, ROI, win rate and mean odds."""
    snapshot = as_snapshot(wagers)
    if not snapshot:
        return PortfolioStats()

    groups = snapshot.by_status
    total = len(snapshot)
    staked = money_sum(w.stake for w in snapshot)
    net = money_sum(w.profit for w in snapshot)
    won = len(groups[WagerStatus.WON])

    return PortfolioStats(
        total_bets=total,
        winning_bets=won,
        losing_bets=len(groups[WagerStatus.LOST]),
        pending_bets=len(groups[WagerStatus.PENDING]),
        void_bets=len(groups[WagerStatus.VOID]),
        cashout_bets=len(groups[WagerStatus.CASHOUT]),
        total_staked=float(staked),
        net_profit=float(net),
        roi=_pct(float(net), float(staked)),
        win_rate=_pct(won, total),
        avg_odds=round_half_up(float(np.mean([w.odds for w in snapshot]))),
    )


def _settled_frame(snapshot: PortfolioSnapshot) -> pd.DataFrame:
    return snapshot.settled().chronological().to_dataframe()


def odds_distribution(wagers: Iterable[Wager] | PortfolioSnapshot) -> list[OddsBucket]:
    """Wins, losses and win rate per decimal-odds bucket.

    Every bucket is returned, empty ones with zero counts.
    """
    labels = [label for label, _ in ODDS_BUCKETS]
    df = _settled_frame(as_snapshot(wagers))
    if df.empty:
        return [OddsBucket(label, 0, 0, 0.0) for label in labels]

    bins = [-np.inf] + [upper for _, upper in ODDS_BUCKETS]
    df["bucket"] = pd.cut(df["odds"], bins=bins, labels=labels, right=True)
    df["won"] = df["status"] == WagerStatus.WON.value

    # observed=False keeps empty buckets, in label order
    counts = df.groupby("bucket", observed=False).agg(
        wins=("won", "sum"), total=("won", "count")
    )
    return [
        OddsBucket(
            label=label,
            wins=int(row.wins),
            losses=int(row.total - row.wins),
            win_rate=_pct(int(row.wins), int(row.total)),
        )
        for label, row in counts.iterrows()
    ]


def rolling_roi(
    wagers: Iterable[Wager] | PortfolioSnapshot,
    window: int | None = None,
) -> list[RoiPoint]:
    """ROI over a trailing window of won/lost wagers, in date order.

    The first point is emitted once ``window`` wagers have accumulated;
    shorter histories return an empty list. A window below 1 is rejected.
    """
    window = check_window(settings.rolling_roi_window if window is None else window)
    df = _settled_frame(as_snapshot(wagers))
    if len(df) < window:
        return []

    stake = df["stake"].rolling(window=window).sum()
    profit = df["profit"].rolling(window=window).sum()
    roi = (profit / stake * 100).where(stake > 0, 0.0)

    return [
        RoiPoint(date=d, roi=round_half_up(float(r)))
        for d, r in zip(df["date"].iloc[window - 1:], roi.iloc[window - 1:])
    ]


def profit_by_week(wagers: Iterable[Wager] | PortfolioSnapshot) -> list[WeekProfit]:
    """Profit per calendar week (Monday start) with a running total.

    Covers every non-pending wager, so void and cashout results count.
    Only weeks containing wagers are returned, oldest first.
    """
    df = as_snapshot(wagers).terminal().chronological().to_dataframe()
    if df.empty:
        return []

    dates = pd.to_datetime(df["date"])
    df["week_start"] = (dates - pd.to_timedelta(dates.dt.dayofweek, unit="D")).dt.date
    weekly = df.groupby("week_start", sort=True).agg(
        profit=("profit", "sum"), count=("profit", "count")
    )
    weekly["cumulative_profit"] = weekly["profit"].cumsum()
    return [
        WeekProfit(
            week_start=week_start,
            profit=round_half_up(float(row.profit)),
            cumulative_profit=round_half_up(float(row.cumulative_profit)),
            count=int(row["count"]),
        )
        for week_start, row in weekly.iterrows()
    ]


def profit_by_weekday(wagers: Iterable[Wager] | PortfolioSnapshot) -> list[WeekdayProfit]:
    """Total and average profit of won/lost wagers per weekday, Monday first."""
    df = _settled_frame(as_snapshot(wagers))
    if df.empty:
        return [WeekdayProfit(day, 0.0, 0.0, 0) for day in WEEKDAY_NAMES]

    df["weekday"] = pd.to_datetime(df["date"]).dt.dayofweek
    by_day = (
        df.groupby("weekday")
        .agg(profit=("profit", "sum"), count=("profit", "count"))
        .reindex(range(7), fill_value=0)
    )
    return [
        WeekdayProfit(
            day=WEEKDAY_NAMES[idx],
            profit=round_half_up(float(row.profit)),
            avg_profit=round_half_up(float(row.profit) / row["count"]) if row["count"] else 0.0,
            count=int(row["count"]),
        )
        for idx, row in by_day.iterrows()
    ]


def roi_by_sport(wagers: Iterable[Wager] | PortfolioSnapshot) -> list[SportRoi]:
    """ROI per sport over non-pending wagers, best first."""
    df = as_snapshot(wagers).to_dataframe()
    df = df[df["status"] != WagerStatus.PENDING.value]
    if df.empty:
        return []

    df["sport"] = df["sport"].replace("", "unknown").fillna("unknown")
    grouped = df.groupby("sport").agg(
        bets=("stake", "count"),
        total_staked=("stake", "sum"),
        net_profit=("profit", "sum"),
    )
    rows = [
        SportRoi(
            sport=str(sport),
            bets=int(row.bets),
            total_staked=round_half_up(float(row.total_staked)),
            net_profit=round_half_up(float(row.net_profit)),
            roi=_pct(float(row.net_profit), float(row.total_staked)),
        )
        for sport, row in grouped.iterrows()
    ]
    return sorted(rows, key=lambda r: r.roi, reverse=True)
