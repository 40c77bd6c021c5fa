"""
Configuration Management for the Finance Engine

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Only the ambient concerns are configurable here
(logging output, the location search collaborator, display defaults).
The engine's policy constants - period multipliers, currency symbols,
the bridge currency - are deliberately NOT settings. They live next to
the code that uses them and must be identical in every deployment.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Structured logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        extra="ignore"
    )

    level: str = Field(
        default="INFO",
        description="Minimum log level (DEBUG, INFO, WARNING, ERROR)"
    )
    json_output: bool = Field(
        default=True,
        description="Render log lines as JSON (False = human readable console output)"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Only accept the standard level names."""
        level = v.strip().upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if level not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return level


class GeocodingSettings(BaseSettings):
    """Location search (Nominatim-compatible API) configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GEOCODING_",
        extra="ignore"
    )

    base_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        description="Base URL of the geocoding service"
    )
    user_agent: str = Field(
        default="finance-engine/1.0",
        description="User-Agent header sent with every request"
    )
    timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        le=60,
        description="Per-request timeout"
    )
    result_limit: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Maximum number of locations returned by a search"
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts per request before giving up on transport errors"
    )
    retry_backoff_seconds: float = Field(
        default=1.0,
        ge=0,
        le=10,
        description="Multiplier for the exponential backoff between attempts"
    )

    @field_validator('base_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Display
    default_display_currency: str = Field(
        default="USD",
        min_length=1,
        max_length=10,
        description="Currency summaries are rendered in when the caller does not choose one"
    )

    @field_validator('default_display_currency')
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.strip().upper()


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Sub-settings are loaded lazily to allow partial configuration

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()

    @property
    def geocoding(self) -> GeocodingSettings:
        return GeocodingSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus a
    "<setting_name>_error" entry for every section that failed.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    for name in ("logging", "geocoding", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
