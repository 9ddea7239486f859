"""Tests for the streak analyzer."""

from datetime import date, timedelta

from betlytics.analytics.drawdown import equity_curve
from betlytics.analytics.streaks import Streak, StreakType, calculate_streaks
from betlytics.analytics.wager import PortfolioSnapshot, Wager


def _history(*statuses: str) -> list[Wager]:
    """Wagers on consecutive days, oldest first."""
    start = date(2024, 3, 1)
    return [
        Wager.create(start + timedelta(days=i), 2.0, 10.0, status)
        for i, status in enumerate(statuses)
    ]


class TestStreaks:
    def test_empty_history(self):
        result = calculate_streaks([])
        assert result.current_streak == Streak(StreakType.NONE, 0)
        assert result.longest_win_streak == 0
        assert result.longest_loss_streak == 0

    def test_only_unsettled_wagers(self):
        result = calculate_streaks(_history("pending", "void"))
        assert result.current_streak.type is StreakType.NONE

    def test_won_won_lost_won(self):
        result = calculate_streaks(_history("won", "won", "lost", "won"))
        assert result.current_streak == Streak(StreakType.WIN, 1)
        assert result.longest_win_streak == 2
        assert result.longest_loss_streak == 1

    def test_single_wager(self):
        result = calculate_streaks(_history("lost"))
        assert result.current_streak == Streak(StreakType.LOSS, 1)
        assert result.longest_loss_streak == 1
        assert result.longest_win_streak == 0

    def test_current_streak_is_leading_run(self):
        result = calculate_streaks(_history("lost", "won", "won", "won"))
        assert result.current_streak == Streak(StreakType.WIN, 3)
        assert result.longest_win_streak == 3
        assert result.longest_loss_streak == 1

    def test_longest_loss_in_the_middle(self):
        result = calculate_streaks(_history("won", "lost", "lost", "lost", "won", "lost"))
        assert result.current_streak == Streak(StreakType.LOSS, 1)
        assert result.longest_loss_streak == 3
        assert result.longest_win_streak == 1

    def test_ignores_void_and_pending(self):
        result = calculate_streaks(_history("won", "void", "won", "pending"))
        assert result.current_streak == Streak(StreakType.WIN, 2)
        assert result.longest_win_streak == 2

    def test_input_order_does_not_matter(self):
        wagers = _history("won", "won", "lost", "won")
        assert calculate_streaks(wagers) == calculate_streaks(list(reversed(wagers)))

    def test_same_date_agrees_with_equity_curve(self):
        day = date(2024, 3, 1)
        wagers = [
            Wager.create(day, 2.0, 10.0, "won"),
            Wager.create(day, 2.0, 10.0, "lost"),
        ]
        # The last listed wager is the latest for every calculator
        assert equity_curve(wagers)[-1].profit == -10.0
        assert calculate_streaks(wagers).current_streak == Streak(StreakType.LOSS, 1)

    def test_same_date_follows_listing_order(self):
        day = date(2024, 3, 1)
        wagers = [Wager.create(day, 2.0, 10.0, s) for s in ("won", "won", "lost", "won")]
        assert calculate_streaks(wagers).current_streak == Streak(StreakType.WIN, 1)
        reversed_result = calculate_streaks(list(reversed(wagers)))
        assert reversed_result.current_streak == Streak(StreakType.WIN, 2)

    def test_idempotent_on_snapshot(self, sample_history):
        assert calculate_streaks(sample_history) == calculate_streaks(sample_history)
        # Settled order: W, L, L, W -> current win 1
        assert calculate_streaks(sample_history).current_streak == Streak(StreakType.WIN, 1)

    def test_accepts_snapshot(self):
        snap = PortfolioSnapshot(tuple(_history("won", "won")))
        assert calculate_streaks(snap).longest_win_streak == 2
