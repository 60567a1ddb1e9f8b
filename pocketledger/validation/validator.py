"""
Ledger Validation

DESIGN DECISION: Entities answer is_valid() with a plain bool, because
that is all the save path needs. When the user has to be told *why* a
save was refused, this validator walks the same rules and reports each
broken one as a ValidationIssue.

The two must always agree: result.is_valid == entity.is_valid().

IMPORTANT: Validation NEVER fixes anything. It reports issues for the
user to correct.
"""

from typing import Optional

from pocketledger.models.data import Data
from pocketledger.models.transaction import (
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    Transaction,
)
from pocketledger.models.validation import ValidationIssue, ValidationResult
from pocketledger.models.wallet import Wallet


class LedgerValidator:
    """Explains why transactions, wallets or a whole ledger can't be saved."""

    def _check_name(self, name: str, field: str) -> list[ValidationIssue]:
        if not name.strip():
            return [ValidationIssue(
                field=field,
                issue_type="missing",
                message="Name is required",
                severity="error",
                suggested_fix="Enter a name",
            )]
        if len(name) > NAME_MAX_LENGTH:
            return [ValidationIssue(
                field=field,
                issue_type="too_long",
                message=f"Name is {len(name)} characters, the limit is {NAME_MAX_LENGTH}",
                severity="error",
                suggested_fix="Shorten the name",
            )]
        return []

    def _check_description(self, description: Optional[str], field: str) -> list[ValidationIssue]:
        if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
            return [ValidationIssue(
                field=field,
                issue_type="too_long",
                message=(
                    f"Description is {len(description)} characters, "
                    f"the limit is {DESCRIPTION_MAX_LENGTH}"
                ),
                severity="error",
                suggested_fix="Shorten the description",
            )]
        return []

    def _transaction_issues(self, transaction: Transaction, prefix: str) -> list[ValidationIssue]:
        issues = []
        issues += self._check_name(transaction.name, f"{prefix}name")
        issues += self._check_description(transaction.description, f"{prefix}description")

        if transaction.amount == 0.0:
            issues.append(ValidationIssue(
                field=f"{prefix}amount",
                issue_type="invalid_value",
                message="Amount cannot be zero",
                severity="error",
                suggested_fix="Use a positive amount for income, negative for an expense",
            ))

        if transaction.end_date is not None and transaction.end_date < transaction.start_date:
            issues.append(ValidationIssue(
                field=f"{prefix}end_date",
                issue_type="inconsistent",
                message=(
                    f"End date ({transaction.end_date}) is before "
                    f"start date ({transaction.start_date})"
                ),
                severity="error",
                suggested_fix="Move the end date after the start date or clear it",
            ))

        return issues

    def _wallet_issues(self, wallet: Wallet, prefix: str) -> list[ValidationIssue]:
        issues = []
        issues += self._check_name(wallet.name, f"{prefix}name")
        issues += self._check_description(wallet.description, f"{prefix}description")
        for index, transaction in enumerate(wallet.transactions):
            issues += self._transaction_issues(
                transaction, f"{prefix}transactions[{index}]."
            )
        return issues

    def validate_transaction(self, transaction: Transaction) -> ValidationResult:
        issues = self._transaction_issues(transaction, "")
        return ValidationResult(
            subject="transaction",
            is_valid=not issues,
            issues=issues,
        )

    def validate_wallet(self, wallet: Wallet) -> ValidationResult:
        issues = self._wallet_issues(wallet, "")
        return ValidationResult(
            subject="wallet",
            is_valid=not issues,
            issues=issues,
        )

    def validate_data(self, data: Data) -> ValidationResult:
        """
        Validate a whole ledger.

        An empty ledger is not an error, but it isn't saveable either:
        it is reported with a single "empty" warning and is_valid=False.
        """
        if data.is_empty():
            return ValidationResult(
                subject="data",
                is_valid=False,
                issues=[ValidationIssue(
                    field="wallets",
                    issue_type="empty",
                    message="The ledger has no wallets",
                    severity="warning",
                    suggested_fix="Add a wallet before saving",
                )],
            )

        issues = []
        for index, wallet in enumerate(data.wallets):
            issues += self._wallet_issues(wallet, f"wallets[{index}].")
        return ValidationResult(
            subject="data",
            is_valid=not issues,
            issues=issues,
        )
