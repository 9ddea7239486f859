"""Pydantic request/response models for the betlytics API."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel


# ── Requests ──────────────────────────────────────────────────────────

class KellyRequest(BaseModel):
    odds: float
    win_probability: float
    bankroll: float
    fraction: float | None = None


class EVRequest(BaseModel):
    odds: float
    win_probability: float
    stake: float


class CLVRequest(BaseModel):
    opening_odds: float
    closing_odds: float


class WagerIn(BaseModel):
    """A wager as exported by the store.

    ``profit`` may be omitted for non-cashout wagers; it is then derived
    from the status.
    """

    date: dt.date
    odds: float
    stake: float
    status: str
    profit: float | None = None
    created_at: dt.datetime | None = None
    settled_at: dt.datetime | None = None
    id: str | None = None
    event: str = ""
    market: str = ""
    sport: str = ""
    league: str = ""
    bookmaker: str = ""


class ReportRequest(BaseModel):
    wagers: list[WagerIn]
    start: dt.date | None = None
    end: dt.date | None = None


class BankrollRequest(BaseModel):
    wagers: list[WagerIn]
    starting_bankroll: float
    as_of: dt.date | None = None


# ── Responses ─────────────────────────────────────────────────────────

class KellyResponse(BaseModel):
    kelly_percentage: float
    recommended_stake: float
    is_safe: bool
    classification: str
    warning: str | None = None


class EVResponse(BaseModel):
    expected_value: float
    expected_value_percentage: float
    is_positive_ev: bool
    break_even_probability: float


class CLVResponse(BaseModel):
    clv_percentage: float
    is_beating_closing: bool
    odds_improvement: float


class StreakResponse(BaseModel):
    type: str
    count: int


class StreaksResponse(BaseModel):
    current_streak: StreakResponse
    longest_win_streak: int
    longest_loss_streak: int


class DrawdownResponse(BaseModel):
    max_drawdown: float
    max_drawdown_percentage: float
    peak_equity: float
    trough_equity: float


class RiskResponse(BaseModel):
    variance: float
    standard_deviation: float
    risk_ratio: float


class PortfolioStatsResponse(BaseModel):
    total_bets: int
    winning_bets: int
    losing_bets: int
    pending_bets: int
    void_bets: int
    cashout_bets: int
    total_staked: float
    net_profit: float
    roi: float
    win_rate: float
    avg_odds: float


class ReportResponse(BaseModel):
    """Full performance report.

    ``profit_factor`` is the string ``"Infinity"`` when wins were recorded
    but no losses; JSON has no infinite number.
    """

    start: dt.date | None = None
    end: dt.date | None = None
    stats: PortfolioStatsResponse
    streaks: StreaksResponse
    drawdown: DrawdownResponse
    risk: RiskResponse
    profit_factor: float | str
    avg_hold_time_days: float


class EquityPointResponse(BaseModel):
    date: dt.date
    profit: float
    equity: float
    peak: float
    drawdown: float


class BankrollPointResponse(BaseModel):
    date: dt.date | None = None  # None for the starting point
    bankroll: float


class StakingTotalsResponse(BaseModel):
    as_of: dt.date
    last_7_days: float
    last_30_days: float


class BankrollResponse(BaseModel):
    starting_bankroll: float
    current_bankroll: float
    growth: float
    growth_percentage: float
    points: list[BankrollPointResponse]
    staking: StakingTotalsResponse


class WeekProfitResponse(BaseModel):
    week_start: dt.date
    profit: float
    cumulative_profit: float
    count: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
