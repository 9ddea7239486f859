"""Analytics engine: wager model, single-wager evaluation and history metrics."""

from betlytics.analytics.bankroll import (
    BankrollHistory,
    BankrollPoint,
    StakingTotals,
    bankroll_history,
    staking_totals,
)
from betlytics.analytics.drawdown import DrawdownResult, EquityPoint, calculate_max_drawdown, equity_curve
from betlytics.analytics.errors import AnalyticsError, InvalidInputError
from betlytics.analytics.evaluator import (
    CLVResult,
    EVResult,
    KellyClassification,
    KellyResult,
    calculate_clv,
    calculate_ev,
    calculate_kelly,
)
from betlytics.analytics.profit import calculate_avg_hold_time, calculate_profit_factor
from betlytics.analytics.report import PerformanceReport, build_report
from betlytics.analytics.risk import RiskResult, calculate_variance
from betlytics.analytics.streaks import Streak, StreakResult, StreakType, calculate_streaks
from betlytics.analytics.summary import (
    PortfolioStats,
    calculate_portfolio_stats,
    odds_distribution,
    profit_by_week,
    profit_by_weekday,
    roi_by_sport,
    rolling_roi,
)
from betlytics.analytics.wager import PortfolioSnapshot, Wager, WagerStatus, settle

__all__ = [
    "AnalyticsError",
    "InvalidInputError",
    "Wager",
    "WagerStatus",
    "PortfolioSnapshot",
    "settle",
    "KellyResult",
    "KellyClassification",
    "EVResult",
    "CLVResult",
    "calculate_kelly",
    "calculate_ev",
    "calculate_clv",
    "Streak",
    "StreakType",
    "StreakResult",
    "calculate_streaks",
    "DrawdownResult",
    "EquityPoint",
    "calculate_max_drawdown",
    "equity_curve",
    "RiskResult",
    "calculate_variance",
    "calculate_profit_factor",
    "calculate_avg_hold_time",
    "PortfolioStats",
    "calculate_portfolio_stats",
    "odds_distribution",
    "rolling_roi",
    "profit_by_week",
    "profit_by_weekday",
    "roi_by_sport",
    "BankrollPoint",
    "BankrollHistory",
    "StakingTotals",
    "bankroll_history",
    "staking_totals",
    "PerformanceReport",
    "build_report",
]
