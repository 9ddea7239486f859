"""Wager-history analytics endpoints."""

from __future__ import annotations

import math
from dataclasses import asdict

from fastapi import APIRouter

from betlytics.analytics.bankroll import bankroll_history, staking_totals
from betlytics.analytics.drawdown import equity_curve
from betlytics.analytics.report import build_report
from betlytics.analytics.summary import profit_by_week
from betlytics.analytics.wager import PortfolioSnapshot
from betlytics.api.schemas import (
    BankrollRequest,
    BankrollResponse,
    EquityPointResponse,
    ReportRequest,
    ReportResponse,
    WagerIn,
    WeekProfitResponse,
)
from betlytics.io import wager_from_record

router = APIRouter()


def _snapshot(wagers: list[WagerIn]) -> PortfolioSnapshot:
    return PortfolioSnapshot(tuple(wager_from_record(w.model_dump()) for w in wagers))


@router.post("/analytics/report", response_model=ReportResponse)
def performance_report(body: ReportRequest) -> dict:
    """Run every calculator over the submitted wager history."""
    report = build_report(_snapshot(body.wagers), body.start, body.end)
    streak = report.streaks.current_streak
    return {
        "start": report.start,
        "end": report.end,
        "stats": asdict(report.stats),
        "streaks": {
            "current_streak": {"type": streak.type.value, "count": streak.count},
            "longest_win_streak": report.streaks.longest_win_streak,
            "longest_loss_streak": report.streaks.longest_loss_streak,
        },
        "drawdown": asdict(report.drawdown),
        "risk": asdict(report.risk),
        "profit_factor": "Infinity" if math.isinf(report.profit_factor) else report.profit_factor,
        "avg_hold_time_days": report.avg_hold_time_days,
    }


@router.post("/analytics/equity-curve", response_model=list[EquityPointResponse])
def equity(body: ReportRequest) -> list[dict]:
    """Cumulative profit after each settled wager."""
    snapshot = _snapshot(body.wagers).between(body.start, body.end)
    return [asdict(p) for p in equity_curve(snapshot)]


@router.post("/analytics/weekly", response_model=list[WeekProfitResponse])
def weekly_profit(body: ReportRequest) -> list[dict]:
    """Profit per week with a running total."""
    snapshot = _snapshot(body.wagers).between(body.start, body.end)
    return [asdict(w) for w in profit_by_week(snapshot)]


@router.post("/analytics/bankroll", response_model=BankrollResponse)
def bankroll(body: BankrollRequest) -> dict:
    """Bankroll replayed from a starting amount, plus recent staking totals."""
    snapshot = _snapshot(body.wagers)
    history = bankroll_history(snapshot, body.starting_bankroll)
    return {
        **asdict(history),
        "staking": asdict(staking_totals(snapshot, body.as_of)),
    }
