"""Diagnostics (structured logging) package."""

from finance_engine.diagnostics.logger import (
    LOGGER_NAME,
    configure_logging,
    emit_diagnostic,
    get_logger,
)

__all__ = ["LOGGER_NAME", "configure_logging", "emit_diagnostic", "get_logger"]
