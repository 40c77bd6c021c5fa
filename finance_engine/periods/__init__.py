"""Recurring amount normalization."""

from finance_engine.periods.normalizer import (
    BIWEEKS_PER_MONTH,
    MONTHS_PER_YEAR,
    WEEKS_PER_MONTH,
    monthly_total,
    normalize_recurring,
    normalize_to_monthly,
)

__all__ = [
    "BIWEEKS_PER_MONTH",
    "MONTHS_PER_YEAR",
    "WEEKS_PER_MONTH",
    "monthly_total",
    "normalize_recurring",
    "normalize_to_monthly",
]
