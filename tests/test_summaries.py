"""Tests for the monthly summary aggregation."""

import pytest
from structlog.testing import capture_logs

from finance_engine.models.currency import (
    ConversionPath,
    CurrencyRate,
    RateSelection,
    RateTable,
)
from finance_engine.models.recurring import Period, RecurringEntry
from finance_engine.summaries import summarize_monthly


@pytest.fixture
def entries() -> list[RecurringEntry]:
    return [
        RecurringEntry(value=1000, currency="USD", period=Period.MONTHLY, label="Salary"),
        RecurringEntry(value=100, currency="EUR", period=Period.WEEKLY, label="Tutoring"),
        RecurringEntry(value=1200, currency="USD", period=Period.ANNUAL, label="Insurance"),
        RecurringEntry(value=50, currency="XYZ", period=Period.MONTHLY, label="Mystery"),
    ]


class TestSummarizeMonthly:
    """Tests for summarize_monthly."""

    def test_totals(self, entries, sample_table):
        """Test conversion then normalization for every entry."""
        with capture_logs():
            summary = summarize_monthly(entries, "USD", sample_table)

        assert summary.display_currency == "USD"
        assert summary.total == pytest.approx(1000 + 100 * 1.1 * 4.33 + 100 + 50)
        assert summary.by_period[Period.MONTHLY] == pytest.approx(1050)
        assert summary.by_period[Period.WEEKLY] == pytest.approx(476.3)
        assert summary.by_period[Period.ANNUAL] == pytest.approx(100)
        assert Period.BIWEEKLY not in summary.by_period

    def test_lines_preserve_order_and_path(self, entries, sample_table):
        """Test per-entry breakdown."""
        with capture_logs():
            summary = summarize_monthly(entries, "USD", sample_table)

        assert [line.label for line in summary.lines] == [
            "Salary", "Tutoring", "Insurance", "Mystery",
        ]
        tutoring = summary.lines[1]
        assert tutoring.path == ConversionPath.DIRECT
        assert tutoring.converted_value == pytest.approx(110.0)
        assert tutoring.monthly_value == pytest.approx(476.3)
        assert summary.lines[0].path == ConversionPath.IDENTITY

    def test_unconverted_currencies_are_flagged(self, entries, sample_table):
        """Test missing paths are counted unchanged and listed."""
        with capture_logs() as logs:
            summary = summarize_monthly(entries, "USD", sample_table)

        assert summary.unconverted_currencies == ("XYZ",)
        assert summary.is_complete is False
        assert summary.lines[3].monthly_value == 50
        assert [entry["event"] for entry in logs] == ["no_conversion_path"]

    def test_formatted_total(self, sample_table):
        """Test the total renders in the display currency."""
        summary = summarize_monthly(
            [RecurringEntry(value=100, currency="USD", period=Period.WEEKLY)],
            "USD",
            sample_table,
        )
        assert summary.formatted_total == "$433.00"
        assert summary.is_complete is True

    def test_zero_decimal_display_currency(self, sample_table):
        """Test a JPY summary via the USD bridge."""
        summary = summarize_monthly(
            [RecurringEntry(value=1200, currency="GBP", period=Period.ANNUAL)],
            "JPY",
            sample_table,
        )
        assert summary.total == pytest.approx(1200 * 1.25 * 150 / 12)
        assert summary.formatted_total == "¥18,750"

    def test_selection_is_forwarded(self, dated_duplicates_table):
        """Test the duplicate-record policy reaches the resolver."""
        entries = [RecurringEntry(value=100, currency="EUR", period=Period.MONTHLY)]

        first = summarize_monthly(entries, "USD", dated_duplicates_table)
        recent = summarize_monthly(
            entries, "USD", dated_duplicates_table,
            selection=RateSelection.MOST_RECENT,
        )
        assert first.total == pytest.approx(105.0)
        assert recent.total == pytest.approx(110.0)

    def test_default_display_currency(self, monkeypatch, sample_table):
        """Test None falls back to the configured display currency."""
        monkeypatch.setenv("DEFAULT_DISPLAY_CURRENCY", "eur")
        summary = summarize_monthly(
            [RecurringEntry(value=110, currency="USD", period=Period.MONTHLY)],
            None,
            sample_table,
        )
        assert summary.display_currency == "EUR"
        assert summary.total == pytest.approx(100.0)
        assert summary.lines[0].path == ConversionPath.REVERSE

    def test_stored_period_spelling(self, sample_table):
        """Test an income row stored as "bi-weekly" flows through the summary."""
        entry = RecurringEntry(value=100, currency="USD", period="bi-weekly")
        summary = summarize_monthly([entry], "USD", sample_table)
        assert summary.by_period[Period.BIWEEKLY] == pytest.approx(216.6)

    def test_empty_entries(self, sample_table):
        """Test an empty list gives an empty, complete summary."""
        summary = summarize_monthly([], "EUR", sample_table)
        assert summary.total == 0.0
        assert summary.lines == ()
        assert summary.formatted_total == "€0.00"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
