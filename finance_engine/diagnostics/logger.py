"""
Diagnostic Logger

DESIGN DECISION: The engine is resilient by requirement - it always hands
back a number or a string, even when the rate table is incomplete. That
makes the diagnostic channel the only place where data problems become
visible, so every fallback the engine takes goes through here.

The logger:
- Is synchronous (the engine itself is synchronous and pure)
- Never raises (a logging failure must not break a render)
- Looks up the structlog logger on every call so test helpers such as
  structlog.testing.capture_logs() always see the events
"""

import logging
from typing import Optional

import structlog

from finance_engine.config import LoggingSettings, get_settings
from finance_engine.models.diagnostic import DiagnosticEvent, DiagnosticSeverity


LOGGER_NAME = "finance_engine"


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure structlog for the application.

    Call once at startup. The engine works without it (structlog's
    defaults apply), which is what the test-suite relies on.
    """
    if settings is None:
        settings = get_settings().logging

    level = getattr(logging, settings.level)
    logging.basicConfig(format="%(message)s", level=level)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.getLogger(LOGGER_NAME).setLevel(level)


def get_logger(name: str = LOGGER_NAME):
    """Get a structlog logger bound to the engine's logger name."""
    return structlog.get_logger(name)


def emit_diagnostic(event: DiagnosticEvent) -> None:
    """
    Write a diagnostic event to the structured log.

    The event type is used as the log event name, so tests can assert on
    e.g. entry["event"] == "no_conversion_path".
    """
    logger = get_logger()
    log_dict = event.to_log_dict()
    log_dict.pop("severity", None)
    # TimeStamper adds the log timestamp
    log_dict.pop("timestamp", None)
    name = event.event_type.value

    try:
        if event.severity == DiagnosticSeverity.ERROR:
            logger.error(name, **log_dict)
        elif event.severity == DiagnosticSeverity.WARNING:
            logger.warning(name, **log_dict)
        elif event.severity == DiagnosticSeverity.INFO:
            logger.info(name, **log_dict)
        else:
            logger.debug(name, **log_dict)
    except Exception as e:  # pragma: no cover - depends on handler setup
        logging.getLogger(LOGGER_NAME).error(
            "diagnostic_emit_failed: %s (%s)", name, e
        )
