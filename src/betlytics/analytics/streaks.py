"""Win/loss streak analysis."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from betlytics.analytics.wager import PortfolioSnapshot, Wager, WagerStatus, as_snapshot


class StreakType(str, Enum):
    WIN = "win"
    LOSS = "loss"
    NONE = "none"


@dataclass(frozen=True)
class Streak:
    type: StreakType = StreakType.NONE
    count: int = 0


@dataclass(frozen=True)
class StreakResult:
    current_streak: Streak = field(default_factory=Streak)
    longest_win_streak: int = 0
    longest_loss_streak: int = 0


def _streak_type(wager: Wager) -> StreakType:
    return StreakType.WIN if wager.status is WagerStatus.WON else StreakType.LOSS


def calculate_streaks(wagers: Iterable[Wager] | PortfolioSnapshot) -> StreakResult:
    """Current and longest win/loss streaks over won/lost wagers.

    Wagers are ordered most recent first; ``current_streak`` is the run that
    starts at the most recent wager.
    """
    ordered = as_snapshot(wagers).settled().most_recent_first()
    if not ordered:
        return StreakResult()

    longest = {StreakType.WIN: 0, StreakType.LOSS: 0}
    current: Streak | None = None
    run_type = StreakType.NONE
    run_count = 0

    for wager in ordered:
        kind = _streak_type(wager)
        if kind is run_type:
            run_count += 1
            continue
        # Streak broken: close the running one
        if run_type is not StreakType.NONE:
            longest[run_type] = max(longest[run_type], run_count)
            if current is None:
                current = Streak(run_type, run_count)
        run_type, run_count = kind, 1

    longest[run_type] = max(longest[run_type], run_count)
    if current is None:
        current = Streak(run_type, run_count)

    return StreakResult(
        current_streak=current,
        longest_win_streak=longest[StreakType.WIN],
        longest_loss_streak=longest[StreakType.LOSS],
    )
