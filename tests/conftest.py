"""Shared fixtures for the finance engine tests."""

from datetime import date

import pytest
import structlog

from finance_engine.config import get_settings
from finance_engine.models.currency import CurrencyRate, RateTable


@pytest.fixture(autouse=True)
def reset_global_config():
    """Undo logging configuration and cached settings between tests."""
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def sample_table() -> RateTable:
    """A small table exercising direct, reverse and bridged lookups."""
    return RateTable([
        CurrencyRate(base_currency="EUR", target_currency="USD", rate=1.1),
        CurrencyRate(base_currency="USD", target_currency="JPY", rate=150.0),
        CurrencyRate(base_currency="GBP", target_currency="USD", rate=1.25),
        CurrencyRate(base_currency="USD", target_currency="KRW", rate=1300.0),
        CurrencyRate(base_currency="INR", target_currency="EUR", rate=0.011),
    ])


@pytest.fixture
def dated_duplicates_table() -> RateTable:
    """Two EUR->USD records where the newer one comes second."""
    return RateTable([
        CurrencyRate(
            base_currency="EUR", target_currency="USD", rate=1.05,
            as_of_date=date(2024, 1, 1),
        ),
        CurrencyRate(
            base_currency="EUR", target_currency="USD", rate=1.10,
            as_of_date=date(2024, 6, 1),
        ),
    ])
