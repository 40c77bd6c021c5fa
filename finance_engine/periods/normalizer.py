"""
Period Normalization

Maps a recurring amount to its canonical monthly value.

CRITICAL: The multipliers below are policy, not math. They approximate
average weeks (4.33) and biweekly periods (2.166) per month and must not
be "corrected" to 52/12 or 26/12 - stored reports and comparisons depend
on these exact values (weekly 100 -> 433.0).
"""

from collections.abc import Iterable
from types import MappingProxyType
from typing import Final, Union

from finance_engine.diagnostics import emit_diagnostic
from finance_engine.models.diagnostic import DiagnosticEventBuilder
from finance_engine.models.recurring import Period, RecurringAmount


WEEKS_PER_MONTH: Final[float] = 4.33
BIWEEKS_PER_MONTH: Final[float] = 2.166
MONTHS_PER_YEAR: Final[int] = 12
DAYS_PER_MONTH: Final[float] = 30.42

# Cadences found in stored income/subscription rows that are not Period
# members. Values are (operator, factor) applied to the stored amount.
_STORED_CADENCES = MappingProxyType({
    "daily": ("mul", DAYS_PER_MONTH),
    "quarterly": ("div", 3),
    "semiannually": ("div", 6),
    "semi-annually": ("div", 6),
    "semiannual": ("div", 6),
})


def normalize_to_monthly(value: float, period: Union[Period, str]) -> float:
    """
    Convert a value recorded per `period` into a value per month.

    Accepts a Period or a stored cadence string ("bi-weekly", "annually",
    "quarterly", "daily", ...). An unrecognized cadence such as "one-time"
    is treated as monthly (value unchanged) and reported as an
    unknown_period diagnostic.
    """
    resolved = period if isinstance(period, Period) else Period.parse(period)

    if resolved == Period.WEEKLY:
        return value * WEEKS_PER_MONTH
    elif resolved == Period.BIWEEKLY:
        return value * BIWEEKS_PER_MONTH
    elif resolved == Period.MONTHLY:
        return value
    elif resolved == Period.ANNUAL:
        return value / MONTHS_PER_YEAR

    stored = _STORED_CADENCES.get(str(period).strip().lower())
    if stored is not None:
        operator, factor = stored
        return value * factor if operator == "mul" else value / factor

    emit_diagnostic(DiagnosticEventBuilder.unknown_period(value, str(period)))
    return value


def normalize_recurring(amount: RecurringAmount) -> float:
    """Monthly value of a RecurringAmount."""
    return normalize_to_monthly(amount.value, amount.period)


def monthly_total(amounts: Iterable[RecurringAmount]) -> float:
    """Sum of the monthly values of several recurring amounts (same currency)."""
    return sum((normalize_recurring(amount) for amount in amounts), 0.0)
