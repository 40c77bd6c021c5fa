"""
Rate Table Validation

DESIGN DECISION: The resolver trusts its input and never fails on bad
data. This validator is the place where data-quality problems in a rate
table snapshot are surfaced, so the data-fetch layer can log them, show
them on the settings page, or refuse to store a bad batch.

Checks:
- Self pairs (base == target); the resolver never reads them
- Non-canonical codes (not three uppercase letters); matching is
  case-sensitive, so "usd" never meets "USD"
- Inverse records that disagree with each other (A->B * B->A far from 1)
- Duplicate pairs, and the subset where first-match and most-recent
  selection would pick different records

IMPORTANT: Validation NEVER silently fixes issues.
It reports them for the caller to act on.
"""

import re
from typing import Final

from finance_engine.diagnostics import emit_diagnostic
from finance_engine.models.currency import RateTable
from finance_engine.models.diagnostic import DiagnosticEventBuilder
from finance_engine.models.validation import (
    RateTableValidationResult,
    ValidationIssue,
)
from finance_engine.rates.resolver import find_recency_conflicts


CANONICAL_CODE: Final = re.compile(r"^[A-Z]{3}$")


class RateTableValidator:
    """
    Validates a rate table snapshot.

    Only inverse mismatches are errors (the table contradicts itself);
    everything else is a warning or informational.
    """

    def __init__(self, inverse_tolerance: float = 0.01):
        """
        Initialize validator.

        Args:
            inverse_tolerance: Allowed relative deviation of
                rate(A->B) * rate(B->A) from 1.0 before it is an error.
        """
        if inverse_tolerance < 0:
            raise ValueError("inverse_tolerance must be >= 0")
        self._inverse_tolerance = inverse_tolerance

    def _check_codes(self, table: RateTable) -> list[ValidationIssue]:
        issues = []
        reported = set()

        for index, record in enumerate(table):
            for code in record.pair:
                if code in reported or CANONICAL_CODE.match(code):
                    continue
                reported.add(code)
                issues.append(ValidationIssue(
                    issue_type="non_canonical_code",
                    message=f"Currency code '{code}' is not three uppercase letters",
                    severity="warning",
                    base_currency=record.base_currency,
                    target_currency=record.target_currency,
                    record_indexes=[index],
                    suggested_fix=f"Store the code as '{code.upper()}'",
                ))

        return issues

    def _check_self_pairs(self, table: RateTable) -> list[ValidationIssue]:
        issues = []

        for index, record in enumerate(table):
            if record.base_currency != record.target_currency:
                continue
            issues.append(ValidationIssue(
                issue_type="self_pair",
                message=(
                    f"Record {record.base_currency}->{record.target_currency} "
                    f"(rate {record.rate}) is never used; same-currency "
                    "conversions always use 1.0"
                ),
                severity="info" if record.rate == 1.0 else "warning",
                base_currency=record.base_currency,
                target_currency=record.target_currency,
                record_indexes=[index],
                suggested_fix="Remove the record",
            ))

        return issues

    def _check_inverse_pairs(self, table: RateTable) -> list[ValidationIssue]:
        """Compare the first record of each pair with the first record of its inverse."""
        issues = []
        first_index: dict[tuple[str, str], int] = {}

        for index, record in enumerate(table):
            first_index.setdefault(record.pair, index)

        for (base, target), index in first_index.items():
            if base >= target:
                continue
            inverse_index = first_index.get((target, base))
            if inverse_index is None:
                continue

            product = table[index].rate * table[inverse_index].rate
            if abs(product - 1.0) > self._inverse_tolerance:
                issues.append(ValidationIssue(
                    issue_type="inverse_mismatch",
                    message=(
                        f"{base}->{target} ({table[index].rate}) and "
                        f"{target}->{base} ({table[inverse_index].rate}) "
                        f"multiply to {product:.6f}, expected 1.0"
                    ),
                    severity="error",
                    base_currency=base,
                    target_currency=target,
                    record_indexes=sorted([index, inverse_index]),
                    suggested_fix="Re-fetch both directions from the same source",
                ))

        return issues

    def _check_duplicates(self, table: RateTable) -> list[ValidationIssue]:
        issues = []
        positions: dict[tuple[str, str], list[int]] = {}

        for index, record in enumerate(table):
            positions.setdefault(record.pair, []).append(index)

        conflicts = {
            (conflict.base_currency, conflict.target_currency): conflict
            for conflict in find_recency_conflicts(table)
        }

        for pair, indexes in positions.items():
            if len(indexes) < 2:
                continue

            conflict = conflicts.get(pair)
            if conflict is None:
                issues.append(ValidationIssue(
                    issue_type="duplicate_pair",
                    message=(
                        f"{len(indexes)} records for {pair[0]}->{pair[1]}; "
                        "the first one is used"
                    ),
                    severity="info",
                    base_currency=pair[0],
                    target_currency=pair[1],
                    record_indexes=indexes,
                ))
            else:
                issues.append(ValidationIssue(
                    issue_type="recency_conflict",
                    message=(
                        f"{len(indexes)} records for {pair[0]}->{pair[1]}: "
                        f"the first in table order has rate {conflict.first_match.rate} "
                        f"(as of {conflict.first_match.as_of_date}), the most recent "
                        f"has rate {conflict.most_recent.rate} "
                        f"(as of {conflict.most_recent.as_of_date})"
                    ),
                    severity="warning",
                    base_currency=pair[0],
                    target_currency=pair[1],
                    record_indexes=indexes,
                    suggested_fix=(
                        "Order the table newest first, or resolve with "
                        "RateSelection.MOST_RECENT"
                    ),
                ))

        return issues

    def validate(self, table: RateTable) -> RateTableValidationResult:
        """
        Run every check against a table.

        Emits a rate_table_issues diagnostic when anything was found.
        """
        issues = []
        issues.extend(self._check_codes(table))
        issues.extend(self._check_self_pairs(table))
        issues.extend(self._check_inverse_pairs(table))
        issues.extend(self._check_duplicates(table))

        result = RateTableValidationResult(
            rate_count=len(table),
            issues=issues,
        )

        if issues:
            emit_diagnostic(
                DiagnosticEventBuilder.rate_table_issues(
                    rate_count=result.rate_count,
                    error_count=result.error_count,
                    warning_count=result.warning_count,
                )
            )

        return result
