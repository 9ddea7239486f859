"""Wager data model, settlement and portfolio snapshots.

A :class:`Wager` is created ``pending`` with zero profit and is settled
exactly once into a terminal status. :func:`settle` is the only place the
status -> profit formula lives; every write path goes through it.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Iterator
from dataclasses import asdict, dataclass, field, replace
from enum import Enum

import pandas as pd

from betlytics.analytics.errors import InvalidInputError
from betlytics.analytics.validation import check_odds, check_positive
from betlytics.constants import (
    DECIDED_STATUSES,
    STATUS_CASHOUT,
    STATUS_LOST,
    STATUS_PENDING,
    STATUS_VOID,
    STATUS_WON,
    TERMINAL_STATUSES,
)
from betlytics.utils.dates import in_range
from betlytics.utils.money import round_half_up
from betlytics.utils.stats import is_finite_number

# Stored profits are cent-rounded by the store
PROFIT_TOLERANCE = 0.01


class WagerStatus(str, Enum):
    """Settlement state of a wager."""

    PENDING = STATUS_PENDING
    WON = STATUS_WON
    LOST = STATUS_LOST
    VOID = STATUS_VOID
    CASHOUT = STATUS_CASHOUT

    @property
    def is_terminal(self) -> bool:
        return self.value in TERMINAL_STATUSES

    @property
    def is_decided(self) -> bool:
        """True for statuses with a win/loss outcome."""
        return self.value in DECIDED_STATUSES


def _coerce_status(status: WagerStatus | str) -> WagerStatus:
    try:
        return WagerStatus(status)
    except ValueError:
        raise InvalidInputError(
            "status", status, f"expected one of {[s.value for s in WagerStatus]}"
        ) from None


def settle(
    status: WagerStatus | str,
    stake: float,
    odds: float,
    manual_profit: float | None = None,
) -> float:
    """Return the realized profit for a wager in ``status``.

    - won: ``stake * (odds - 1)``
    - lost: ``-stake``
    - void / pending: ``0``
    - cashout: ``manual_profit`` (required, any finite value)

    The result is rounded to cents.
    """
    status = _coerce_status(status)
    stake = check_positive(stake, "stake")
    odds = check_odds(odds)

    if status is WagerStatus.CASHOUT:
        if manual_profit is None or not is_finite_number(manual_profit):
            raise InvalidInputError(
                "manual_profit", manual_profit, "a cashout needs a finite manual profit"
            )
        return round_half_up(manual_profit)
    if manual_profit is not None:
        raise InvalidInputError(
            "manual_profit", manual_profit, f"only cashout accepts a manual profit, got {status.value}"
        )

    if status is WagerStatus.WON:
        return round_half_up(stake * (odds - 1))
    if status is WagerStatus.LOST:
        return round_half_up(-stake)
    return 0.0


@dataclass(frozen=True)
class Wager:
    """A single staked prediction with decimal odds.

    Construction checks ``odds >= 1``, ``stake > 0`` and, for every status
    except cashout, that ``profit`` agrees with :func:`settle` to within a
    cent.
    """

    date: dt.date
    odds: float
    stake: float
    status: WagerStatus = WagerStatus.PENDING
    profit: float = 0.0
    created_at: dt.datetime | None = None
    settled_at: dt.datetime | None = None
    id: str | None = None
    event: str = ""
    market: str = ""
    sport: str = ""
    league: str = ""
    bookmaker: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", _coerce_status(self.status))
        object.__setattr__(self, "odds", check_odds(self.odds))
        object.__setattr__(self, "stake", check_positive(self.stake, "stake"))
        if isinstance(self.date, dt.datetime):
            object.__setattr__(self, "date", self.date.date())

        if not is_finite_number(self.profit):
            raise InvalidInputError("profit", self.profit, "must be a finite number")
        if self.status is not WagerStatus.CASHOUT:
            expected = settle(self.status, self.stake, self.odds)
            if abs(self.profit - expected) > PROFIT_TOLERANCE:
                raise InvalidInputError(
                    "profit",
                    self.profit,
                    f"a {self.status.value} wager at {self.odds} for {self.stake} "
                    f"must have profit {expected}",
                )

    @classmethod
    def create(
        cls,
        date: dt.date,
        odds: float,
        stake: float,
        status: WagerStatus | str = WagerStatus.PENDING,
        manual_profit: float | None = None,
        **details,
    ) -> Wager:
        """Build a wager whose profit is computed by :func:`settle`."""
        profit = settle(status, stake, odds, manual_profit)
        return cls(date=date, odds=odds, stake=stake, status=status, profit=profit, **details)

    def settled(
        self,
        status: WagerStatus | str,
        manual_profit: float | None = None,
        settled_at: dt.datetime | None = None,
    ) -> Wager:
        """Return a copy transitioned from pending to a terminal status."""
        status = _coerce_status(status)
        if self.status.is_terminal:
            raise InvalidInputError(
                "status", self.status.value, "wager is already settled"
            )
        if not status.is_terminal:
            raise InvalidInputError("status", status.value, "target status must be terminal")
        return replace(
            self,
            status=status,
            profit=settle(status, self.stake, self.odds, manual_profit),
            settled_at=settled_at if settled_at is not None else self.settled_at,
        )

    @property
    def is_decided(self) -> bool:
        return self.status.is_decided


@dataclass(frozen=True)
class PortfolioSnapshot:
    """All wagers of one user at one point in time.

    Immutable; filtering and sorting return new snapshots.
    """

    wagers: tuple[Wager, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, wagers: Iterable[Wager] | PortfolioSnapshot) -> PortfolioSnapshot:
        if isinstance(wagers, PortfolioSnapshot):
            return wagers
        return cls(tuple(wagers))

    def __iter__(self) -> Iterator[Wager]:
        return iter(self.wagers)

    def __len__(self) -> int:
        return len(self.wagers)

    def __bool__(self) -> bool:
        return bool(self.wagers)

    @property
    def by_status(self) -> dict[WagerStatus, tuple[Wager, ...]]:
        """Partition by status; every status is present, possibly empty."""
        groups: dict[WagerStatus, list[Wager]] = {s: [] for s in WagerStatus}
        for w in self.wagers:
            groups[w.status].append(w)
        return {s: tuple(ws) for s, ws in groups.items()}

    def with_status(self, *statuses: WagerStatus | str) -> PortfolioSnapshot:
        wanted = {_coerce_status(s) for s in statuses}
        return PortfolioSnapshot(tuple(w for w in self.wagers if w.status in wanted))

    def settled(self) -> PortfolioSnapshot:
        """Only won/lost wagers."""
        return PortfolioSnapshot(tuple(w for w in self.wagers if w.is_decided))

    def terminal(self) -> PortfolioSnapshot:
        """Every wager with a final outcome, i.e. all but pending."""
        return PortfolioSnapshot(tuple(w for w in self.wagers if w.status.is_terminal))

    def chronological(self) -> PortfolioSnapshot:
        """Sorted by date ascending; ties keep input order."""
        return PortfolioSnapshot(tuple(sorted(self.wagers, key=lambda w: w.date)))

    def most_recent_first(self) -> PortfolioSnapshot:
        """Exact reverse of :meth:`chronological`.

        Among wagers on the same date the one listed last is the latest.
        """
        return PortfolioSnapshot(tuple(reversed(self.chronological().wagers)))

    def between(
        self, start: dt.date | None = None, end: dt.date | None = None
    ) -> PortfolioSnapshot:
        """Inclusive date-range filter. No bounds returns the snapshot unchanged."""
        if start is None and end is None:
            return self
        return PortfolioSnapshot(
            tuple(w for w in self.wagers if in_range(w.date, start, end))
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Convert the snapshot to a DataFrame (one row per wager)."""
        columns = [f.name for f in Wager.__dataclass_fields__.values()]
        if not self.wagers:
            return pd.DataFrame(columns=columns)
        rows = []
        for w in self.wagers:
            row = asdict(w)
            row["status"] = w.status.value
            rows.append(row)
        return pd.DataFrame(rows, columns=columns)


def as_snapshot(wagers: Iterable[Wager] | PortfolioSnapshot) -> PortfolioSnapshot:
    """Accept a snapshot or any iterable of wagers."""
    return PortfolioSnapshot.of(wagers)
