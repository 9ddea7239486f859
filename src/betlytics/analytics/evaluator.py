"""Single-wager evaluation: Kelly sizing, expected value and closing-line value.

Pure functions over scalar inputs; no wager history is needed. Invalid
inputs raise :class:`~betlytics.analytics.errors.InvalidInputError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from betlytics.analytics.validation import (
    check_fraction,
    check_non_negative,
    check_odds,
    check_positive,
    check_probability,
)
from betlytics.config import settings
from betlytics.constants import KELLY_HIGH_WARNING, KELLY_NO_EDGE_WARNING
from betlytics.utils.logging import get_logger
from betlytics.utils.money import round_half_up
from betlytics.utils.stats import implied_probability, kelly_criterion

log = get_logger(__name__)


class KellyClassification(str, Enum):
    NO_EDGE = "no_edge"
    SAFE = "safe"
    HIGH = "high"


@dataclass(frozen=True)
class KellyResult:
    """Fractional Kelly recommendation."""

    kelly_percentage: float  # % of bankroll, in [0, 100]
    recommended_stake: float
    classification: KellyClassification
    warning: str | None = None

    @property
    def is_safe(self) -> bool:
        return self.classification is KellyClassification.SAFE


@dataclass(frozen=True)
class EVResult:
    expected_value: float
    expected_value_percentage: float
    is_positive_ev: bool
    break_even_probability: float  # percent


@dataclass(frozen=True)
class CLVResult:
    clv_percentage: float
    is_beating_closing: bool
    odds_improvement: float


def classify_kelly(
    kelly_percentage: float, threshold: float | None = None
) -> tuple[KellyClassification, str | None]:
    """Map a Kelly percentage to a classification and optional warning."""
    threshold = settings.kelly_warning_threshold if threshold is None else threshold
    if kelly_percentage <= 0:
        return KellyClassification.NO_EDGE, KELLY_NO_EDGE_WARNING
    if kelly_percentage <= threshold:
        return KellyClassification.SAFE, None
    return KellyClassification.HIGH, KELLY_HIGH_WARNING


def calculate_kelly(
    odds: float,
    win_probability: float,
    bankroll: float,
    fraction: float | None = None,
    warning_threshold: float | None = None,
) -> KellyResult:
    """Fractional Kelly stake for a single wager.

    Parameters
    ----------
    odds : float
        Decimal odds (>= 1.0). Odds of exactly 1.0 carry no edge.
    win_probability : float
        Estimated probability of winning, in [0, 1].
    bankroll : float
        Current bankroll (>= 0).
    fraction : float, optional
        Share of full Kelly to use, in (0, 1]. Defaults to
        ``settings.kelly_fraction`` (quarter-Kelly).
    warning_threshold : float, optional
        Kelly percentage above which the stake is flagged as high.
        Defaults to ``settings.kelly_warning_threshold``.

    Returns
    -------
    KellyResult with percentage and stake rounded to 2 decimals.
    """
    odds = check_odds(odds)
    p = check_probability(win_probability)
    bankroll = check_non_negative(bankroll, "bankroll")
    fraction = check_fraction(settings.kelly_fraction if fraction is None else fraction)

    # kelly_criterion returns 0 for b == 0 and for negative edge
    kelly_pct = min(max(kelly_criterion(p, odds, fraction=fraction) * 100, 0.0), 100.0)
    stake = bankroll * kelly_pct / 100
    kelly_pct = round_half_up(kelly_pct)

    classification, warning = classify_kelly(kelly_pct, warning_threshold)
    log.debug(
        "kelly_calculated",
        odds=odds,
        win_probability=p,
        fraction=fraction,
        kelly_percentage=kelly_pct,
        classification=classification.value,
    )
    return KellyResult(
        kelly_percentage=kelly_pct,
        recommended_stake=round_half_up(stake),
        classification=classification,
        warning=warning,
    )


def calculate_ev(odds: float, win_probability: float, stake: float) -> EVResult:
    """Expected value of staking ``stake`` at ``odds`` with win chance ``win_probability``.

    ``break_even_probability`` is the win probability (in percent) at which
    EV is zero for these odds; it does not depend on the stake.
    """
    odds = check_odds(odds)
    p = check_probability(win_probability)
    stake = check_positive(stake, "stake")

    profit_if_win = stake * (odds - 1)
    ev = p * profit_if_win - (1 - p) * stake
    return EVResult(
        expected_value=round_half_up(ev),
        expected_value_percentage=round_half_up(ev / stake * 100),
        is_positive_ev=ev > 0,
        break_even_probability=round_half_up(implied_probability(odds) * 100),
    )


def calculate_clv(opening_odds: float, closing_odds: float) -> CLVResult:
    """Closing-line value of a wager placed at ``opening_odds``.

    Positive when the market closed at longer odds than the price taken.
    """
    opening_odds = check_odds(opening_odds, "opening_odds")
    closing_odds = check_odds(closing_odds, "closing_odds")

    clv_pct = (closing_odds - opening_odds) / opening_odds * 100
    return CLVResult(
        clv_percentage=round_half_up(clv_pct),
        is_beating_closing=clv_pct > 0,
        odds_improvement=round_half_up(closing_odds - opening_odds),
    )
