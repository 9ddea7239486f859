"""Wager statuses, odds buckets and other fixed reference values."""

# Wager lifecycle
STATUS_PENDING = "pending"
STATUS_WON = "won"
STATUS_LOST = "lost"
STATUS_VOID = "void"
STATUS_CASHOUT = "cashout"

TERMINAL_STATUSES = frozenset({STATUS_WON, STATUS_LOST, STATUS_VOID, STATUS_CASHOUT})

# Only these carry a win/loss outcome; streaks, drawdown and risk use them
DECIDED_STATUSES = frozenset({STATUS_WON, STATUS_LOST})

# Decimal odds floor (stake returned, no profit)
MIN_DECIMAL_ODDS = 1.0

# Odds distribution buckets: (label, upper bound inclusive)
ODDS_BUCKETS = [
    ("1.00-1.50", 1.50),
    ("1.51-2.00", 2.00),
    ("2.01-3.00", 3.00),
    ("3.01-5.00", 5.00),
    ("5.00+", float("inf")),
]

# Kelly classification labels
KELLY_NO_EDGE_WARNING = "No edge detected - Kelly suggests not betting"
KELLY_HIGH_WARNING = "Kelly stake very high - consider reducing bet size"

# Average hold time is reported in days to one decimal
HOLD_TIME_PLACES = 1

# Trailing staking windows (calendar days, ending on the as-of date)
STAKING_WINDOW_WEEK = 7
STAKING_WINDOW_MONTH = 30
