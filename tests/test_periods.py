"""Tests for monthly normalization of recurring amounts."""

import pytest
from structlog.testing import capture_logs

from finance_engine.models.recurring import Period, RecurringAmount
from finance_engine.periods import (
    BIWEEKS_PER_MONTH,
    MONTHS_PER_YEAR,
    WEEKS_PER_MONTH,
    monthly_total,
    normalize_recurring,
    normalize_to_monthly,
)


class TestNormalizeToMonthly:
    """Tests for the fixed multiplier table."""

    def test_policy_constants(self):
        """Test the multipliers are the documented constants."""
        assert WEEKS_PER_MONTH == 4.33
        assert BIWEEKS_PER_MONTH == 2.166
        assert MONTHS_PER_YEAR == 12

    def test_weekly(self):
        """Test weekly 100 -> 433.0 (not 400 or 434.8)."""
        assert normalize_to_monthly(100, Period.WEEKLY) == 433.0

    def test_biweekly(self):
        """Test biweekly 50 -> 108.3."""
        assert normalize_to_monthly(50, Period.BIWEEKLY) == 108.3

    def test_monthly_is_unchanged(self):
        """Test monthly values pass through."""
        assert normalize_to_monthly(812.34, Period.MONTHLY) == 812.34

    def test_annual(self):
        """Test annual 1200 -> 100.0."""
        assert normalize_to_monthly(1200, Period.ANNUAL) == 100.0

    def test_negative_values(self):
        """Test refunds/credits normalize the same way."""
        assert normalize_to_monthly(-1200, Period.ANNUAL) == -100.0

    @pytest.mark.parametrize("text,expected", [
        ("weekly", 433.0),
        ("bi-weekly", 100 * 2.166),
        ("annually", 100 / 12),
        ("Monthly", 100.0),
    ])
    def test_string_periods(self, text, expected):
        """Test stored cadence strings are accepted."""
        assert normalize_to_monthly(100, text) == pytest.approx(expected)

    @pytest.mark.parametrize("text,value,expected", [
        ("quarterly", 300, 100.0),
        ("Semiannually", 600, 100.0),
        ("semi-annually", 600, 100.0),
        ("daily", 10, 304.2),
    ])
    def test_stored_cadences_outside_period(self, text, value, expected):
        """Test quarterly, semiannual and daily rows are normalized, not passed through."""
        with capture_logs() as logs:
            result = normalize_to_monthly(value, text)

        assert result == pytest.approx(expected)
        assert logs == []

    def test_quarterly_bill_is_not_tripled(self):
        """Test a quarterly 300 counts as 100 per month."""
        assert normalize_to_monthly(300, "quarterly") == 100

    def test_unknown_period_falls_back_to_monthly(self):
        """Test unknown cadences return the value and emit a diagnostic."""
        with capture_logs() as logs:
            result = normalize_to_monthly(75.0, "one-time")

        assert result == 75.0
        assert len(logs) == 1
        assert logs[0]["event"] == "unknown_period"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["period"] == "one-time"

    def test_known_period_is_silent(self):
        """Test no diagnostic for supported cadences."""
        with capture_logs() as logs:
            normalize_to_monthly(10, Period.WEEKLY)
            normalize_to_monthly(10, "annual")
        assert logs == []


class TestRecurringHelpers:
    """Tests for RecurringAmount helpers."""

    def test_normalize_recurring(self):
        """Test normalization of a RecurringAmount."""
        amount = RecurringAmount(value=1200, period=Period.ANNUAL)
        assert normalize_recurring(amount) == 100.0

    def test_monthly_total(self):
        """Test aggregation of several cadences."""
        amounts = [
            RecurringAmount(value=100, period=Period.WEEKLY),
            RecurringAmount(value=1200, period=Period.ANNUAL),
            RecurringAmount(value=50, period=Period.MONTHLY),
        ]
        assert monthly_total(amounts) == pytest.approx(583.0)

    def test_monthly_total_empty(self):
        """Test an empty list totals zero."""
        assert monthly_total([]) == 0.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
