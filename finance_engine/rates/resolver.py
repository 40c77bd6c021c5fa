"""
Rate Resolution

Finds the conversion factor between two currencies in a sparse rate table.

Resolution precedence (strict, first hit wins):
1. IDENTITY - from == to, factor 1.0, the table is not consulted
2. DIRECT   - a record from -> to, factor = rate
3. REVERSE  - a record to -> from, factor = 1 / rate
4. BRIDGE   - records from -> USD and USD -> to, factor = product
5. NONE     - no path

DESIGN DECISION: Only a single bridge hop through a fixed pivot currency
is attempted. Longer paths are not searched.

KNOWN AMBIGUITY: When a table holds several records for the same ordered
pair, FIRST_MATCH (the default) takes the first one in table order with
no regard to as_of_date. MOST_RECENT is available as an explicit opt-in,
and find_recency_conflicts() lists the pairs where the two disagree.
"""

from typing import Final, NamedTuple, Optional

from finance_engine.models.currency import (
    ConversionPath,
    CurrencyRate,
    RateSelection,
    RateTable,
    ResolvedRate,
)


BRIDGE_CURRENCY: Final[str] = "USD"


class RecencyConflict(NamedTuple):
    """An ordered pair whose first-match and most-recent records differ."""
    base_currency: str
    target_currency: str
    first_match: CurrencyRate
    most_recent: CurrencyRate


def _is_newer(candidate: CurrencyRate, current: CurrencyRate) -> bool:
    """Undated records rank oldest; equal dates keep table order."""
    if candidate.as_of_date is None:
        return False
    if current.as_of_date is None:
        return True
    return candidate.as_of_date > current.as_of_date


def find_rate(
    table: RateTable,
    base_currency: str,
    target_currency: str,
    selection: RateSelection = RateSelection.FIRST_MATCH,
) -> Optional[CurrencyRate]:
    """
    Find the record for an ordered pair.

    Returns None if the table has no record for base -> target.
    """
    if selection == RateSelection.FIRST_MATCH:
        for record in table:
            if (
                record.base_currency == base_currency
                and record.target_currency == target_currency
            ):
                return record
        return None

    best: Optional[CurrencyRate] = None
    for record in table:
        if (
            record.base_currency == base_currency
            and record.target_currency == target_currency
        ):
            if best is None or _is_newer(record, best):
                best = record
    return best


def resolve_rate_details(
    from_currency: str,
    to_currency: str,
    table: RateTable,
    selection: RateSelection = RateSelection.FIRST_MATCH,
) -> ResolvedRate:
    """
    Resolve the conversion factor and report how it was obtained.

    Never raises for missing data: an unresolvable pair yields
    ResolvedRate(rate=None, path=ConversionPath.NONE).
    """
    if from_currency == to_currency:
        return ResolvedRate(rate=1.0, path=ConversionPath.IDENTITY)

    direct = find_rate(table, from_currency, to_currency, selection)
    if direct is not None:
        return ResolvedRate(
            rate=direct.rate,
            path=ConversionPath.DIRECT,
            records=(direct,),
        )

    reverse = find_rate(table, to_currency, from_currency, selection)
    if reverse is not None:
        return ResolvedRate(
            rate=1 / reverse.rate,
            path=ConversionPath.REVERSE,
            records=(reverse,),
        )

    to_bridge = find_rate(table, from_currency, BRIDGE_CURRENCY, selection)
    from_bridge = find_rate(table, BRIDGE_CURRENCY, to_currency, selection)
    if to_bridge is not None and from_bridge is not None:
        return ResolvedRate(
            rate=to_bridge.rate * from_bridge.rate,
            path=ConversionPath.BRIDGE,
            records=(to_bridge, from_bridge),
        )

    return ResolvedRate(rate=None, path=ConversionPath.NONE)


def resolve_rate(
    from_currency: str,
    to_currency: str,
    table: RateTable,
    selection: RateSelection = RateSelection.FIRST_MATCH,
) -> Optional[float]:
    """
    Resolve the conversion factor from one currency to another.

    Returns:
        The factor to multiply an amount by, or None if no path exists.
    """
    return resolve_rate_details(from_currency, to_currency, table, selection).rate


def find_recency_conflicts(table: RateTable) -> list[RecencyConflict]:
    """
    List the ordered pairs where FIRST_MATCH and MOST_RECENT disagree.

    Pairs are reported in order of first appearance in the table.
    """
    conflicts = []
    seen: set[tuple[str, str]] = set()

    for record in table:
        if record.pair in seen:
            continue
        seen.add(record.pair)

        first = find_rate(table, *record.pair, selection=RateSelection.FIRST_MATCH)
        recent = find_rate(table, *record.pair, selection=RateSelection.MOST_RECENT)
        if first is not None and recent is not None and first != recent:
            conflicts.append(RecencyConflict(
                base_currency=record.base_currency,
                target_currency=record.target_currency,
                first_match=first,
                most_recent=recent,
            ))

    return conflicts
