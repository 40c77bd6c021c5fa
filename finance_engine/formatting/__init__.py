"""Currency display formatting."""

from finance_engine.formatting.formatter import (
    CURRENCY_SYMBOLS,
    ZERO_DECIMAL_CURRENCIES,
    currency_decimal_places,
    format_amount,
    format_currency,
    get_currency_symbol,
)

__all__ = [
    "CURRENCY_SYMBOLS",
    "ZERO_DECIMAL_CURRENCIES",
    "currency_decimal_places",
    "format_amount",
    "format_currency",
    "get_currency_symbol",
]
