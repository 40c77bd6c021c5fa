"""
Data Models Package

This package contains all Pydantic models used by the finance engine.
All data flowing through the engine must conform to these schemas.
"""

from finance_engine.models.currency import (
    Amount,
    ConversionPath,
    ConversionResult,
    CurrencyRate,
    RateSelection,
    RateTable,
    RateTableError,
    ResolvedRate,
)
from finance_engine.models.diagnostic import (
    DiagnosticEvent,
    DiagnosticEventBuilder,
    DiagnosticEventType,
    DiagnosticSeverity,
)
from finance_engine.models.location import LocationResult
from finance_engine.models.recurring import (
    MonthlySummary,
    Period,
    RecurringAmount,
    RecurringEntry,
    SummaryLine,
)
from finance_engine.models.validation import (
    RateTableValidationResult,
    ValidationIssue,
)

__all__ = [
    # Currency models
    "Amount",
    "ConversionPath",
    "ConversionResult",
    "CurrencyRate",
    "RateSelection",
    "RateTable",
    "RateTableError",
    "ResolvedRate",
    # Recurring models
    "MonthlySummary",
    "Period",
    "RecurringAmount",
    "RecurringEntry",
    "SummaryLine",
    # Diagnostic models
    "DiagnosticEvent",
    "DiagnosticEventBuilder",
    "DiagnosticEventType",
    "DiagnosticSeverity",
    # Location models
    "LocationResult",
    # Validation models
    "RateTableValidationResult",
    "ValidationIssue",
]
