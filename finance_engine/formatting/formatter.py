"""
Currency Formatting

Renders an amount and a currency code into a display string such as
"$1,234.50" or "¥1,235".

Rules:
- Symbols come from a fixed, read-only table. Unknown codes use the code
  itself as the symbol ("XYZ1,234.50").
- Zero-decimal currencies (JPY, KRW) round to a whole number.
- Everything else shows exactly two decimals.
- Rounding is half away from zero, grouping is en-US (comma thousands).
- The sign goes in front of the symbol: "-$12.00".

DESIGN DECISION: Rounding works on the shortest decimal representation of
the float (repr), not its binary expansion, so 2.675 renders as "2.68"
the way a person reading the number expects.
"""

import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import Final

from finance_engine.diagnostics import emit_diagnostic
from finance_engine.models.currency import Amount
from finance_engine.models.diagnostic import DiagnosticEventBuilder


CURRENCY_SYMBOLS: Final[Mapping[str, str]] = MappingProxyType({
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "KRW": "₩",
    "INR": "₹",
    "CNY": "¥",
    "AUD": "A$",
    "CAD": "C$",
    "CHF": "Fr",
    "HKD": "HK$",
    "SGD": "S$",
    "NZD": "NZ$",
    "MXN": "MX$",
    "BRL": "R$",
    "RUB": "₽",
})

ZERO_DECIMAL_CURRENCIES: Final[frozenset[str]] = frozenset({"JPY", "KRW"})

# Enough digits to quantize any finite float without overflowing the context
_DECIMAL_PRECISION: Final[int] = 400


def _normalize_code(currency: str) -> str:
    return str(currency).strip().upper()


def get_currency_symbol(currency: str) -> str:
    """Display symbol for a code, or the code itself if it is not known."""
    return CURRENCY_SYMBOLS.get(_normalize_code(currency), currency)


def currency_decimal_places(currency: str) -> int:
    """Number of fraction digits shown for a currency (0 or 2)."""
    return 0 if _normalize_code(currency) in ZERO_DECIMAL_CURRENCIES else 2


def format_currency(value: float, currency: str) -> str:
    """
    Format a value as a human-readable amount in the given currency.

    Deterministic and stateless: the same (value, currency) always gives
    the same string. Never raises for unknown codes or non-finite values.
    """
    code = _normalize_code(currency)
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        emit_diagnostic(DiagnosticEventBuilder.unknown_currency_code(currency))
        symbol = currency

    value = float(value)
    if math.isnan(value):
        return f"{symbol}NaN"
    if math.isinf(value):
        return f"-{symbol}∞" if value < 0 else f"{symbol}∞"

    places = currency_decimal_places(code)
    quantum = Decimal(1) if places == 0 else Decimal(1).scaleb(-places)

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        digits = f"{abs(rounded):,.{places}f}"

    return f"{sign}{symbol}{digits}"


def format_amount(amount: Amount) -> str:
    """Format an Amount value object."""
    return format_currency(amount.value, amount.currency)
