"""
Domain Entity: Transaction
Represents a single movement of money on an account
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """Bank transaction entity

    amount is signed: positive for a credit (deposit),
    negative for a debit (withdrawal).
    """

    timestamp: datetime
    amount: Decimal

    @property
    def is_credit(self) -> bool:
        return self.amount > 0

    @property
    def is_debit(self) -> bool:
        return self.amount < 0
