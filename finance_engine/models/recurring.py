"""
Recurring Amount Models

Income and expense records are captured on whatever cadence the user
thinks in (weekly pay, annual insurance premium, ...). These models carry
such amounts until they are normalized to a monthly figure.
"""

from enum import Enum
from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finance_engine.models.currency import ConversionPath


class Period(str, Enum):
    """
    Recording cadence of a recurring amount.

    DESIGN DECISION: Only the four cadences the dashboard records are
    supported. Spelling variants found in stored data are accepted by
    Period.parse, never by widening the enum.
    """
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    ANNUAL = "annual"

    @classmethod
    def parse(cls, text: str) -> Optional["Period"]:
        """
        Parse a stored cadence string.

        Returns None when the text is not a known cadence.
        """
        key = str(text).strip().lower()
        return _PERIOD_ALIASES.get(key)


_PERIOD_ALIASES = MappingProxyType({
    "weekly": Period.WEEKLY,
    "biweekly": Period.BIWEEKLY,
    "bi-weekly": Period.BIWEEKLY,
    "bi_weekly": Period.BIWEEKLY,
    "fortnightly": Period.BIWEEKLY,
    "monthly": Period.MONTHLY,
    "annual": Period.ANNUAL,
    "annually": Period.ANNUAL,
    "yearly": Period.ANNUAL,
})


class RecurringAmount(BaseModel):
    """A recurring value together with the cadence it was recorded on."""
    model_config = ConfigDict(frozen=True)

    value: float
    period: Period

    @field_validator("period", mode="before")
    @classmethod
    def parse_stored_period(cls, v):
        """Accept stored spellings such as "bi-weekly" or "annually"."""
        if isinstance(v, str) and not isinstance(v, Period):
            return Period.parse(v) or v
        return v


class RecurringEntry(BaseModel):
    """
    A recurring income/expense line as a summary widget sees it.

    Unlike RecurringAmount, it also knows its currency so it can be
    converted to the display currency before aggregation.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    value: float
    currency: str = Field(
        ...,
        min_length=1,
        max_length=10,
    )
    period: Period
    label: Optional[str] = Field(
        default=None,
        max_length=200,
        description="Display name, e.g. 'Salary' or 'Netflix'"
    )

    @field_validator("period", mode="before")
    @classmethod
    def parse_stored_period(cls, v):
        if isinstance(v, str) and not isinstance(v, Period):
            return Period.parse(v) or v
        return v


# =============================================================================
# SUMMARY MODELS
# =============================================================================

class SummaryLine(BaseModel):
    """One entry of a monthly summary after conversion and normalization."""
    model_config = ConfigDict(frozen=True)

    label: Optional[str] = None
    original_value: float
    original_currency: str
    period: Period
    converted_value: float = Field(
        ...,
        description="Value in the display currency, per original period"
    )
    monthly_value: float = Field(
        ...,
        description="Value in the display currency, per month"
    )
    path: ConversionPath


class MonthlySummary(BaseModel):
    """
    Canonical monthly totals for a set of recurring entries.

    IMPORTANT: Entries whose currency could not be converted are still
    counted (unchanged). Their codes are listed in unconverted_currencies
    so the UI can flag the total as approximate.
    """
    model_config = ConfigDict(frozen=True)

    display_currency: str
    total: float = 0.0
    by_period: dict[Period, float] = Field(default_factory=dict)
    lines: tuple[SummaryLine, ...] = ()
    unconverted_currencies: tuple[str, ...] = ()

    @property
    def is_complete(self) -> bool:
        """True when every entry was converted to the display currency."""
        return not self.unconverted_currencies

    @property
    def formatted_total(self) -> str:
        from finance_engine.formatting import format_currency

        return format_currency(self.total, self.display_currency)
