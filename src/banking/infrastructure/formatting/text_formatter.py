"""
Infrastructure Adapter: Text Statement Formatter
Implements IStatementFormatter as a fixed-width table

Example:
    date       |   credit |    debit |  balance
    19-01-2022 |          |   500.00 |  2500.00
    18-01-2022 |  2000.00 |          |  3000.00
    12-01-2022 |  1000.00 |          |  1000.00
"""

from decimal import Decimal
from itertools import accumulate
from typing import Optional

from ...application.ports.statement_formatter import IStatementFormatter
from ...domain.entities.transaction import Transaction


STATEMENT_HEADER = "date       |   credit |    debit |  balance"
DEFAULT_DATE_FORMAT = "%d-%m-%Y"
COLUMN_WIDTH = 8


class TextStatementFormatter(IStatementFormatter):
    """Renders transactions newest first with running balances"""

    def __init__(self, date_format: str = DEFAULT_DATE_FORMAT):
        self.date_format = date_format

    def format(self, transactions: list[Transaction]) -> str:
        """
        Render the statement

        The balance of a line is the sum of its transaction and every
        older one. Transactions may arrive in any order; sorting is stable
        so same-timestamp transactions must be given oldest first.
        """
        chronological = sorted(transactions, key=lambda t: t.timestamp)
        balances = accumulate(t.amount for t in chronological)

        lines = [
            self._format_line(transaction, balance)
            for transaction, balance in zip(chronological, balances)
        ]
        lines.reverse()

        return "\n".join([STATEMENT_HEADER] + lines)

    def _format_line(self, transaction: Transaction, balance: Decimal) -> str:
        credit = transaction.amount if transaction.is_credit else None
        debit = -transaction.amount if transaction.is_debit else None

        return " | ".join([
            transaction.timestamp.strftime(self.date_format),
            self._column(credit),
            self._column(debit),
            self._column(balance),
        ])

    @staticmethod
    def _column(value: Optional[Decimal]) -> str:
        if value is None:
            return " " * COLUMN_WIDTH
        return f"{value:.2f}".rjust(COLUMN_WIDTH)
