"""Configuration package."""

from finance_engine.config.settings import (
    AppSettings,
    GeocodingSettings,
    LoggingSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "GeocodingSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
