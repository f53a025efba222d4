"""
Domain Entity: Account
Holds an identity and its transactions, newest first
"""

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from ..money import ZERO, positive_amount
from ..result import Failure, Result, Success
from ..enums import AccountError
from .transaction import Transaction

if TYPE_CHECKING:
    from ...application.ports.clock import IClock
    from ...application.ports.statement_formatter import IStatementFormatter


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Account:
    """Bank account entity

    Every successful operation returns a new Account with one transaction
    prepended; the receiver is never modified.
    """

    id: UUID
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)

    @property
    def balance(self) -> Decimal:
        """Sum of all transaction amounts"""
        return sum((t.amount for t in self.transactions), ZERO)

    def deposit(self, clock: "IClock", amount) -> Result["Account"]:
        """
        Credit the account

        Args:
            clock: Source of the transaction timestamp
            amount: Amount to credit, must be above zero

        Returns:
            Success with the updated account, or Failure(INVALID_AMOUNT)
        """
        value = positive_amount(amount)
        if value is None:
            logger.debug(f"[deposit] account={self.id} rejected amount={amount}")
            return Failure(AccountError.INVALID_AMOUNT, "Invalid amount for deposit")

        return Success(self._record(Transaction(clock.now(), value)))

    def withdraw(self, clock: "IClock", amount) -> Result["Account"]:
        """
        Debit the account

        The whole balance may be withdrawn; going below zero is refused.

        Returns:
            Success with the updated account, or Failure(INVALID_AMOUNT)
            / Failure(INSUFFICIENT_FUNDS)
        """
        value = positive_amount(amount)
        if value is None:
            logger.debug(f"[withdraw] account={self.id} rejected amount={amount}")
            return Failure(AccountError.INVALID_AMOUNT, "Invalid amount for withdraw")

        if self.balance < value:
            return Failure(
                AccountError.INSUFFICIENT_FUNDS,
                f"Not enough money to withdraw {value}"
            )

        return Success(self._record(Transaction(clock.now(), -value)))

    def to_statement(self, formatter: "IStatementFormatter") -> str:
        """Render this account's transactions with the given formatter

        Transactions are handed over oldest first so that equal timestamps
        keep the order in which they happened.
        """
        return formatter.format(list(reversed(self.transactions)))

    def _record(self, transaction: Transaction) -> "Account":
        return replace(self, transactions=(transaction,) + self.transactions)
