"""
Finance Engine - Source Package

The financial normalization engine behind the personal-finance dashboard:
currency conversion over a sparse rate table, monthly normalization of
recurring amounts, and deterministic currency formatting.

DESIGN PRINCIPLES:
1. Pure functions over explicit, immutable inputs
2. Always return a usable value for display
3. Never hide a fallback - every one is reported as a diagnostic
4. Policy constants are fixed in code, not configuration
"""

from finance_engine.formatting import format_currency
from finance_engine.models import (
    Amount,
    CurrencyRate,
    Period,
    RateTable,
    RecurringAmount,
)
from finance_engine.periods import normalize_to_monthly
from finance_engine.rates import (
    convert_amount,
    get_available_currencies,
    resolve_rate,
)

__version__ = "1.0.0"
__author__ = "Finance Dashboard Team"

__all__ = [
    "Amount",
    "CurrencyRate",
    "Period",
    "RateTable",
    "RecurringAmount",
    "convert_amount",
    "format_currency",
    "get_available_currencies",
    "normalize_to_monthly",
    "resolve_rate",
]
