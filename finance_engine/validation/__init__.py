"""Rate table validation package."""

from finance_engine.validation.validator import RateTableValidator

__all__ = ["RateTableValidator"]
