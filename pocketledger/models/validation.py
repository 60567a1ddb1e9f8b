"""
Validation Result Models

is_valid() on the entities answers "may this be saved?". These models carry
the longer answer: which field is wrong and what the user can do about it.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """One broken rule, located by a path into the ledger."""

    field: str = Field(
        ...,
        description="Field with the issue, e.g. 'wallets[0].transactions[2].amount'"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'too_long', 'invalid_value')"
    )
    message: str = Field(
        ...,
        description="What is wrong, worded for the person editing the ledger"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity; an empty ledger is the only warning"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="What the user can change to fix it"
    )


class ValidationResult(BaseModel):
    """Outcome of validating a transaction, wallet or whole ledger."""

    subject: str = Field(
        ...,
        description="What was validated ('transaction', 'wallet' or 'data')"
    )
    is_valid: bool = Field(
        ...,
        description="Overall validation result, same answer as is_valid()"
    )
    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="Every broken rule, in ledger order"
    )

    @property
    def has_errors(self) -> bool:
        """Any error-level issue."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Number of error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")
