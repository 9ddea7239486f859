"""Single-wager calculator endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from betlytics.analytics.evaluator import calculate_clv, calculate_ev, calculate_kelly
from betlytics.api.schemas import (
    CLVRequest,
    CLVResponse,
    EVRequest,
    EVResponse,
    KellyRequest,
    KellyResponse,
)

router = APIRouter()


@router.post("/calculators/kelly", response_model=KellyResponse)
def kelly(body: KellyRequest) -> dict:
    """Fractional Kelly stake recommendation."""
    result = calculate_kelly(body.odds, body.win_probability, body.bankroll, body.fraction)
    return {
        "kelly_percentage": result.kelly_percentage,
        "recommended_stake": result.recommended_stake,
        "is_safe": result.is_safe,
        "classification": result.classification.value,
        "warning": result.warning,
    }


@router.post("/calculators/ev", response_model=EVResponse)
def expected_value(body: EVRequest) -> dict:
    """Expected value and break-even probability."""
    result = calculate_ev(body.odds, body.win_probability, body.stake)
    return {
        "expected_value": result.expected_value,
        "expected_value_percentage": result.expected_value_percentage,
        "is_positive_ev": result.is_positive_ev,
        "break_even_probability": result.break_even_probability,
    }


@router.post("/calculators/clv", response_model=CLVResponse)
def closing_line_value(body: CLVRequest) -> dict:
    """Closing-line value."""
    result = calculate_clv(body.opening_odds, body.closing_odds)
    return {
        "clv_percentage": result.clv_percentage,
        "is_beating_closing": result.is_beating_closing,
        "odds_improvement": result.odds_improvement,
    }
