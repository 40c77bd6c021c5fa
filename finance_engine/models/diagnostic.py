"""
Diagnostic Models

The engine never raises for missing or incomplete data. Instead it returns
a usable value and reports what happened through a diagnostic event.

DESIGN DECISION: Diagnostics are the ONLY channel through which a caller
(or a test) can tell "no conversion needed" apart from "no conversion
path found" when using the plain convert_amount API. They must stay
structured so they can be asserted on.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class DiagnosticEventType(str, Enum):
    """Things the engine reports instead of failing."""
    # Conversion
    NO_CONVERSION_PATH = "no_conversion_path"

    # Normalization
    UNKNOWN_PERIOD = "unknown_period"

    # Formatting
    UNKNOWN_CURRENCY_CODE = "unknown_currency_code"

    # Data quality
    RATE_TABLE_ISSUES = "rate_table_issues"

    # Collaborators
    LOCATION_SEARCH_FAILED = "location_search_failed"


class DiagnosticSeverity(str, Enum):
    """Severity level for diagnostic events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class DiagnosticEvent(BaseModel):
    """A single diagnostic event."""

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )
    event_type: DiagnosticEventType
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Event-specific data"
    )
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.

        The event name itself is passed separately to the logger.
        """
        log_dict = {
            "timestamp": self.timestamp.isoformat(),
            "severity": self.severity.value,
            "description": self.description,
            **self.details,
        }
        if self.error_message:
            log_dict["error_message"] = self.error_message
        return log_dict


class DiagnosticEventBuilder:
    """
    Helper class to build diagnostic events with common patterns.

    Usage:
        event = DiagnosticEventBuilder.no_conversion_path(100.0, "EUR", "XYZ")
        emit_diagnostic(event)
    """

    @staticmethod
    def no_conversion_path(
        amount: float,
        from_currency: str,
        to_currency: str,
    ) -> DiagnosticEvent:
        return DiagnosticEvent(
            event_type=DiagnosticEventType.NO_CONVERSION_PATH,
            severity=DiagnosticSeverity.WARNING,
            description=(
                f"No conversion path from {from_currency} to {to_currency}; "
                "returning the original amount"
            ),
            details={
                "amount": amount,
                "from_currency": from_currency,
                "to_currency": to_currency,
            },
        )

    @staticmethod
    def unknown_period(value: float, period: str) -> DiagnosticEvent:
        return DiagnosticEvent(
            event_type=DiagnosticEventType.UNKNOWN_PERIOD,
            severity=DiagnosticSeverity.WARNING,
            description=f"Unknown period '{period}'; treating the value as monthly",
            details={"value": value, "period": period},
        )

    @staticmethod
    def unknown_currency_code(currency: str) -> DiagnosticEvent:
        return DiagnosticEvent(
            event_type=DiagnosticEventType.UNKNOWN_CURRENCY_CODE,
            severity=DiagnosticSeverity.DEBUG,
            description=f"No display symbol for '{currency}'; using the code itself",
            details={"currency": currency},
        )

    @staticmethod
    def rate_table_issues(
        rate_count: int,
        error_count: int,
        warning_count: int,
    ) -> DiagnosticEvent:
        return DiagnosticEvent(
            event_type=DiagnosticEventType.RATE_TABLE_ISSUES,
            severity=(
                DiagnosticSeverity.WARNING if error_count
                else DiagnosticSeverity.INFO
            ),
            description=(
                f"Rate table has {error_count} error(s) and "
                f"{warning_count} warning(s)"
            ),
            details={
                "rate_count": rate_count,
                "error_count": error_count,
                "warning_count": warning_count,
            },
        )

    @staticmethod
    def location_search_failed(
        operation: str,
        error_message: str,
        query: Optional[str] = None,
    ) -> DiagnosticEvent:
        details: dict[str, Any] = {"operation": operation}
        if query is not None:
            details["query"] = query
        return DiagnosticEvent(
            event_type=DiagnosticEventType.LOCATION_SEARCH_FAILED,
            severity=DiagnosticSeverity.WARNING,
            description=f"Location {operation} failed; returning an empty result",
            details=details,
            error_message=error_message,
        )
