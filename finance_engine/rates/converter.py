"""
Amount Conversion

Applies a resolved factor to an amount.

CRITICAL - FALLBACK POLICY: When no conversion path exists, the original
amount is returned UNCHANGED and a no_conversion_path diagnostic is
emitted. Display layers must always receive a number. Callers of
convert_amount() cannot tell "no conversion needed" from "no path found"
except through the diagnostic log; callers that need to know should use
convert_with_details() and check result.converted.
"""

from finance_engine.diagnostics import emit_diagnostic
from finance_engine.models.currency import (
    ConversionPath,
    ConversionResult,
    RateSelection,
    RateTable,
    ResolvedRate,
)
from finance_engine.models.diagnostic import DiagnosticEventBuilder
from finance_engine.rates.resolver import resolve_rate_details


def _apply(amount: float, resolved: ResolvedRate) -> float:
    """
    Apply the resolved records to the amount.

    Reverse paths divide by the stored rate and bridge paths multiply
    hop by hop, so results match converting by hand.
    """
    if resolved.path == ConversionPath.DIRECT:
        return amount * resolved.records[0].rate
    if resolved.path == ConversionPath.REVERSE:
        return amount / resolved.records[0].rate
    if resolved.path == ConversionPath.BRIDGE:
        to_bridge, from_bridge = resolved.records
        return amount * to_bridge.rate * from_bridge.rate
    return amount


def convert_with_details(
    amount: float,
    from_currency: str,
    to_currency: str,
    table: RateTable,
    selection: RateSelection = RateSelection.FIRST_MATCH,
) -> ConversionResult:
    """
    Convert an amount and report the factor and path used.

    Never raises for missing data. If no path exists, the result carries
    the original amount with rate=None and path=NONE.
    """
    resolved = resolve_rate_details(from_currency, to_currency, table, selection)

    if resolved.rate is None:
        emit_diagnostic(
            DiagnosticEventBuilder.no_conversion_path(
                amount=amount,
                from_currency=from_currency,
                to_currency=to_currency,
            )
        )

    return ConversionResult(
        amount=_apply(amount, resolved),
        rate=resolved.rate,
        original_amount=amount,
        from_currency=from_currency,
        to_currency=to_currency,
        path=resolved.path,
    )


def convert_amount(
    amount: float,
    from_currency: str,
    to_currency: str,
    table: RateTable,
    selection: RateSelection = RateSelection.FIRST_MATCH,
) -> float:
    """
    Convert an amount from one currency to another.

    Returns the original amount unchanged if no conversion path exists.
    """
    return convert_with_details(
        amount, from_currency, to_currency, table, selection
    ).amount
