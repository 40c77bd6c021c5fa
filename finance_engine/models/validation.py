"""
Rate Table Validation Models

IMPORTANT: Validation NEVER fixes data. It reports issues so the data-fetch
layer (or a human) can decide what to do.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """A single validation issue found in a rate table."""

    issue_type: str = Field(
        ...,
        description="Type of issue (e.g. 'self_pair', 'inverse_mismatch', 'recency_conflict')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    base_currency: Optional[str] = None
    target_currency: Optional[str] = None
    record_indexes: list[int] = Field(
        default_factory=list,
        description="Positions of the offending records in the table"
    )
    suggested_fix: Optional[str] = None


class RateTableValidationResult(BaseModel):
    """Result of validating one rate table snapshot."""

    validated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    rate_count: int = Field(ge=0)
    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == "warning")

    @property
    def is_valid(self) -> bool:
        return not self.has_errors

    def issues_of_type(self, issue_type: str) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.issue_type == issue_type]
