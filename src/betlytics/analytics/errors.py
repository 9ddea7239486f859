"""Exceptions raised by the analytics engine."""

from __future__ import annotations

from typing import Any


class AnalyticsError(Exception):
    """Base class for analytics engine errors."""


class InvalidInputError(AnalyticsError, ValueError):
    """An input lies outside a calculator's valid domain.

    Raised at the call boundary, before any computation, for out-of-range
    odds, probabilities, stakes, bankrolls or Kelly fractions and for
    inconsistent settlements.
    """

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")
