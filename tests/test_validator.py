"""Tests for LedgerValidator and the validation result models."""

from datetime import date

import pytest

from pocketledger.models import Data, Transaction, ValidationIssue, ValidationResult, Wallet
from pocketledger.validation import LedgerValidator


@pytest.fixture
def validator() -> LedgerValidator:
    return LedgerValidator()


def transaction(**overrides) -> Transaction:
    fields = dict(id=1, name="Groceries", amount=-42.0, start_date=date(2024, 3, 1))
    fields.update(overrides)
    return Transaction(**fields)


class TestValidateTransaction:
    """Tests for per-transaction explanations."""

    def test_valid(self, validator):
        """Test that a valid transaction has no issues."""
        result = validator.validate_transaction(transaction())
        assert result.is_valid
        assert result.issues == []
        assert result.subject == "transaction"

    def test_zero_amount(self, validator):
        """Test the zero amount issue."""
        result = validator.validate_transaction(transaction(amount=0.0))
        assert not result.is_valid
        assert [(i.field, i.issue_type) for i in result.issues] == [("amount", "invalid_value")]

    def test_missing_and_long_names(self, validator):
        """Test name issues."""
        assert validator.validate_transaction(transaction(name="  ")).issues[0].issue_type == "missing"
        assert validator.validate_transaction(transaction(name="n" * 101)).issues[0].issue_type == "too_long"

    def test_long_description(self, validator):
        """Test the description limit."""
        issue = validator.validate_transaction(transaction(description="d" * 501)).issues[0]
        assert issue.field == "description"
        assert issue.issue_type == "too_long"

    def test_end_before_start(self, validator):
        """Test the date range issue."""
        result = validator.validate_transaction(transaction(end_date=date(2024, 2, 1)))
        assert result.issues[0].field == "end_date"
        assert result.issues[0].issue_type == "inconsistent"

    def test_several_issues_at_once(self, validator):
        """Test that every broken rule is reported."""
        result = validator.validate_transaction(
            transaction(name="", amount=0.0, end_date=date(2024, 2, 1))
        )
        assert result.error_count == 3
        assert result.has_errors

    @pytest.mark.parametrize("candidate", [
        transaction(),
        transaction(name=""),
        transaction(name="x" * 100),
        transaction(amount=0.0),
        transaction(amount=0.01),
        transaction(description="d" * 500),
        transaction(end_date=date(2024, 3, 1)),
        transaction(end_date=date(2024, 2, 29)),
    ])
    def test_agrees_with_is_valid(self, validator, candidate):
        """Test that the validator and is_valid() never disagree."""
        assert validator.validate_transaction(candidate).is_valid == candidate.is_valid()


class TestValidateWalletAndData:
    """Tests for nested validation."""

    def test_wallet_field_paths(self, validator):
        """Test that transaction issues are prefixed with their position."""
        wallet = Wallet(id=1, name="Cash", transactions=[transaction(), transaction(id=2, amount=0.0)])
        result = validator.validate_wallet(wallet)
        assert not result.is_valid
        assert result.issues[0].field == "transactions[1].amount"

    def test_data_field_paths(self, validator):
        """Test that wallet issues are prefixed with their position."""
        data = Data(wallets=[
            Wallet(id=1, name="Cash"),
            Wallet(id=2, name="", transactions=[transaction(amount=0.0)]),
        ])
        result = validator.validate_data(data)
        assert not result.is_valid
        assert [i.field for i in result.issues] == [
            "wallets[1].name",
            "wallets[1].transactions[0].amount",
        ]
        assert result.is_valid == data.is_valid()

    def test_valid_data(self, validator, sample_data):
        """Test a saveable ledger."""
        result = validator.validate_data(sample_data)
        assert result.is_valid
        assert result.issues == []

    def test_empty_data_is_a_warning(self, validator):
        """Test that an empty ledger can't be saved but isn't an error."""
        result = validator.validate_data(Data())
        assert not result.is_valid
        assert not result.has_errors
        assert [(i.issue_type, i.severity) for i in result.issues] == [("empty", "warning")]


class TestValidationModels:
    """Tests for ValidationIssue and ValidationResult."""

    def test_severity_is_restricted(self):
        """Test that only known severities are accepted."""
        with pytest.raises(ValueError):
            ValidationIssue(field="name", issue_type="missing", message="x", severity="fatal")

    def test_warnings_only(self):
        """Test counting with warning-only results."""
        result = ValidationResult(
            subject="data",
            is_valid=True,
            issues=[ValidationIssue(field="name", issue_type="odd", message="x", severity="warning")],
        )
        assert not result.has_errors
        assert result.error_count == 0
