"""Currency rate resolution and conversion."""

from finance_engine.rates.converter import convert_amount, convert_with_details
from finance_engine.rates.currencies import get_available_currencies
from finance_engine.rates.resolver import (
    BRIDGE_CURRENCY,
    RecencyConflict,
    find_rate,
    find_recency_conflicts,
    resolve_rate,
    resolve_rate_details,
)

__all__ = [
    "BRIDGE_CURRENCY",
    "RecencyConflict",
    "convert_amount",
    "convert_with_details",
    "find_rate",
    "find_recency_conflicts",
    "get_available_currencies",
    "resolve_rate",
    "resolve_rate_details",
]
