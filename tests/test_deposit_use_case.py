"""
Unit tests for DepositUseCase.

Ports are stubbed to verify:
1. Unknown accounts are reported without touching storage
2. Domain failures are returned untouched and nothing is saved
3. Successful deposits are saved and returned
"""
from decimal import Decimal

import pytest

from banking.application.commands import Deposit
from banking.application.use_cases.deposit import DepositUseCase
from banking.domain.entities.transaction import Transaction
from banking.domain.enums import AccountError
from banking.domain.result import Failure, Success
from tests.factories import ANOTHER_DATE_TIME, a_transaction, an_account


class TestDepositUseCase:
    """Test DepositUseCase with stubbed repository and clock."""

    @pytest.fixture
    def use_case(self, repository_stub, clock_stub) -> DepositUseCase:
        return DepositUseCase(repository_stub, clock_stub)

    def test_unknown_account(self, use_case, repository_stub, account_id):
        """Non existing account is a failure."""
        result = use_case.execute(Deposit(account_id=account_id, amount=1000))

        assert result == Failure(AccountError.UNKNOWN_ACCOUNT, "Unknown account")
        repository_stub.find.assert_called_once_with(account_id)
        repository_stub.save.assert_not_called()

    @pytest.mark.parametrize("amount", [0, -1, -1000])
    def test_invalid_amount(self, use_case, repository_stub, account_id, amount):
        """Deposits of <= 0 are refused and not saved."""
        repository_stub.find.return_value = an_account(account_id=account_id)

        result = use_case.execute(Deposit(account_id=account_id, amount=amount))

        assert result == Failure(AccountError.INVALID_AMOUNT, "Invalid amount for deposit")
        repository_stub.save.assert_not_called()

    def test_saves_account_with_new_transaction(
        self, use_case, repository_stub, account_id, transaction_time
    ):
        """Deposit of 1000 stores Transaction(transaction_time, 1000)."""
        repository_stub.find.return_value = an_account(account_id=account_id)

        result = use_case.execute(Deposit(account_id=account_id, amount=1000))

        assert isinstance(result, Success)
        assert result.value.transactions == (Transaction(transaction_time, Decimal("1000.00")),)
        repository_stub.save.assert_called_once_with(result.value)

    def test_keeps_existing_transactions(
        self, use_case, repository_stub, account_id, transaction_time
    ):
        """An account holding Transaction(09/10/1987, -200) keeps it after the deposit."""
        existing = a_transaction("-200", ANOTHER_DATE_TIME)
        repository_stub.find.return_value = an_account(existing, account_id=account_id)

        result = use_case.execute(Deposit(account_id=account_id, amount=1000))

        assert result.value.transactions == (
            Transaction(transaction_time, Decimal("1000.00")),
            existing,
        )
        repository_stub.save.assert_called_once_with(result.value)
