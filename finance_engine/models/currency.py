"""
Currency Data Models

These models define the value objects the conversion engine works on.
They are designed to:
1. Reject malformed rate rows at the boundary where they enter the system
2. Be immutable once built (a rate table is a snapshot for one computation)
3. Carry enough detail for callers that need to know HOW a number was produced

DESIGN DECISION: The resolver never re-validates rates. A CurrencyRate
cannot be built with a non-positive or non-finite rate, so any RateTable
the resolver sees is already well formed. Validation of the raw rows is
the job of whoever turns database rows into CurrencyRate objects
(see RateTable.from_records).
"""

from collections.abc import Iterable, Iterator, Mapping
from datetime import date
from enum import Enum
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    ValidationError,
    field_validator,
    model_validator,
)


class RateTableError(ValueError):
    """A raw rate row could not be turned into a CurrencyRate."""

    def __init__(self, row_index: int, message: str):
        self.row_index = row_index
        super().__init__(message)


# =============================================================================
# ENUMS
# =============================================================================

class ConversionPath(str, Enum):
    """
    How a conversion factor was obtained.

    Listed in resolution precedence order.
    """
    IDENTITY = "identity"   # Same currency, no lookup
    DIRECT = "direct"       # base == from, target == to
    REVERSE = "reverse"     # base == to, target == from (1 / rate)
    BRIDGE = "bridge"       # from -> USD -> to
    NONE = "none"           # No path; amount is returned unchanged


class RateSelection(str, Enum):
    """
    Which record wins when a table holds several rates for one ordered pair.

    FIRST_MATCH is the default and picks the first record in table order.
    MOST_RECENT picks the record with the latest as_of_date and must be
    requested explicitly.
    """
    FIRST_MATCH = "first_match"
    MOST_RECENT = "most_recent"


# =============================================================================
# RATE RECORDS
# =============================================================================

class CurrencyRate(BaseModel):
    """
    One directed exchange-rate record.

    Means: 1 unit of base_currency = rate units of target_currency.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    base_currency: str = Field(
        ...,
        min_length=1,
        max_length=10,
        description="Currency converted from"
    )
    target_currency: str = Field(
        ...,
        min_length=1,
        max_length=10,
        description="Currency converted to"
    )
    rate: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Units of target_currency per unit of base_currency"
    )
    as_of_date: Optional[date] = Field(
        default=None,
        description="Date the rate was observed (only used by MOST_RECENT selection)"
    )
    id: Optional[str] = Field(
        default=None,
        description="Identifier of the source row, if any"
    )

    @field_validator('id', mode='before')
    @classmethod
    def stringify_id(cls, v: Any) -> Optional[str]:
        """Database rows carry UUIDs; keep them as plain strings."""
        if v is None:
            return None
        return str(v)

    @property
    def pair(self) -> tuple[str, str]:
        return (self.base_currency, self.target_currency)


class RateTable(RootModel[tuple[CurrencyRate, ...]]):
    """
    Read-only, ordered collection of CurrencyRate records.

    Scoped to a single computation: callers rebuild it on every fetch.
    Order matters, because the first matching record wins by default.
    """
    model_config = ConfigDict(frozen=True)

    root: tuple[CurrencyRate, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def unwrap_rates_keyword(cls, data: Any) -> Any:
        """Allow RateTable(rates=[...]) as well as RateTable([...])."""
        if isinstance(data, dict) and set(data) == {"rates"}:
            return data["rates"]
        return data

    def __iter__(self) -> Iterator[CurrencyRate]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> CurrencyRate:
        return self.root[index]

    @classmethod
    def from_records(cls, rows: Iterable[Mapping[str, Any]]) -> "RateTable":
        """
        Build a table from raw rows (e.g. database query results).

        Unknown keys such as user_id or created_at are ignored.

        Raises:
            RateTableError: If a row is missing fields or has a rate <= 0
        """
        rates = []
        for index, row in enumerate(rows):
            data = {
                key: row[key]
                for key in ("base_currency", "target_currency", "rate", "as_of_date", "id")
                if key in row
            }
            try:
                rates.append(CurrencyRate.model_validate(data))
            except ValidationError as e:
                raise RateTableError(
                    row_index=index,
                    message=f"Invalid currency rate at row {index}: {e}",
                ) from e
        return cls(tuple(rates))


# =============================================================================
# AMOUNTS AND RESULTS
# =============================================================================

class Amount(BaseModel):
    """A monetary value in a given currency."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    value: float
    currency: str = Field(
        ...,
        min_length=1,
        max_length=10,
        description="Currency code, e.g. USD or JPY"
    )


class ResolvedRate(BaseModel):
    """
    Detailed answer from the rate resolver.

    records holds the CurrencyRate rows the factor was built from:
    none for IDENTITY/NONE, one for DIRECT/REVERSE, two for BRIDGE.
    """
    model_config = ConfigDict(frozen=True)

    rate: Optional[float] = None
    path: ConversionPath
    records: tuple[CurrencyRate, ...] = ()

    @property
    def found(self) -> bool:
        return self.rate is not None


class ConversionResult(BaseModel):
    """
    Result of converting an amount.

    CRITICAL: When no path exists, amount == original_amount and rate is None.
    This is the only way (besides the diagnostic log) to tell an unconverted
    amount apart from a converted one.
    """
    model_config = ConfigDict(frozen=True)

    amount: float = Field(
        ...,
        description="Converted amount (or the original amount if no path exists)"
    )
    rate: Optional[float] = Field(
        default=None,
        description="Effective factor applied, None if no path exists"
    )
    original_amount: float
    from_currency: str
    to_currency: str
    path: ConversionPath

    @property
    def converted(self) -> bool:
        return self.rate is not None
