"""
Monthly Summary Aggregation

Used by the income and subscription summary widgets: every recurring entry
is converted to the display currency, normalized to a monthly value and
summed.

GUARANTEES:
- Always returns a total, even when some currencies cannot be converted
- Unconvertible entries are counted at their original value and their
  codes are listed in unconverted_currencies, never hidden
- Entry order is preserved in the per-line breakdown
"""

from collections.abc import Iterable
from typing import Optional

from finance_engine.config import get_settings
from finance_engine.models.currency import ConversionPath, RateSelection, RateTable
from finance_engine.models.recurring import (
    MonthlySummary,
    Period,
    RecurringEntry,
    SummaryLine,
)
from finance_engine.periods import normalize_to_monthly
from finance_engine.rates import convert_with_details


def summarize_monthly(
    entries: Iterable[RecurringEntry],
    display_currency: Optional[str],
    table: RateTable,
    selection: RateSelection = RateSelection.FIRST_MATCH,
) -> MonthlySummary:
    """
    Aggregate recurring entries into a monthly total in one currency.

    Args:
        entries: Income or expense lines on any cadence and currency
        display_currency: Currency the totals are expressed in; None uses
            the configured default_display_currency
        table: Rate table snapshot for this computation
        selection: Duplicate-record policy passed to the resolver
    """
    if display_currency is None:
        display_currency = get_settings().app.default_display_currency

    lines = []
    by_period: dict[Period, float] = {}
    unconverted: list[str] = []
    total = 0.0

    for entry in entries:
        conversion = convert_with_details(
            entry.value,
            entry.currency,
            display_currency,
            table,
            selection,
        )
        monthly = normalize_to_monthly(conversion.amount, entry.period)

        if conversion.path == ConversionPath.NONE and entry.currency not in unconverted:
            unconverted.append(entry.currency)

        lines.append(SummaryLine(
            label=entry.label,
            original_value=entry.value,
            original_currency=entry.currency,
            period=entry.period,
            converted_value=conversion.amount,
            monthly_value=monthly,
            path=conversion.path,
        ))
        by_period[entry.period] = by_period.get(entry.period, 0.0) + monthly
        total += monthly

    return MonthlySummary(
        display_currency=display_currency,
        total=total,
        by_period=by_period,
        lines=tuple(lines),
        unconverted_currencies=tuple(unconverted),
    )
