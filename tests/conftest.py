"""Shared pytest fixtures for betlytics tests."""

from __future__ import annotations

from datetime import date

import pytest

from betlytics.analytics.wager import PortfolioSnapshot, Wager


@pytest.fixture
def sample_history():
    """A mixed-status history across two weeks.

    Settled profits in date order: +100, -50, -100, +100.
    """
    return PortfolioSnapshot((
        Wager.create(date(2024, 1, 1), 2.0, 100.0, "won", sport="NBA"),     # Mon
        Wager.create(date(2024, 1, 2), 1.8, 50.0, "lost", sport="NBA"),     # Tue
        Wager.create(date(2024, 1, 3), 3.5, 100.0, "lost", sport="NFL"),    # Wed
        Wager.create(date(2024, 1, 8), 6.0, 20.0, "won", sport="NFL"),      # Mon
        Wager.create(date(2024, 1, 9), 2.5, 40.0, "pending", sport="NBA"),
        Wager.create(date(2024, 1, 10), 1.5, 10.0, "void", sport="Tennis"),
        Wager.create(date(2024, 1, 11), 2.0, 30.0, "cashout", manual_profit=12.0, sport="Tennis"),
    ))


@pytest.fixture
def wager_csv(tmp_path):
    """A store export with camelCase timestamps and a blank profit."""
    path = tmp_path / "bets.csv"
    path.write_text(
        "id,date,event,odds,stake,status,profit,sport,createdAt,updatedAt\n"
        "b1,2024-01-01,A vs B,2.0,100,won,100,NBA,2024-01-01T10:00:00Z,2024-01-02T10:00:00Z\n"
        "b2,2024-01-02,C vs D,1.8,50,lost,,NBA,2024-01-02T10:00:00Z,\n"
        "b3,2024-01-03,E vs F,2.5,40,pending,0,NFL,,\n"
    )
    return path
