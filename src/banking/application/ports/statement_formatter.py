"""
Port: Statement Formatter Interface
Defines contract for rendering transactions as a statement
"""

from abc import ABC, abstractmethod

from ...domain.entities.transaction import Transaction


class IStatementFormatter(ABC):
    """Interface for statement rendering"""

    @abstractmethod
    def format(self, transactions: list[Transaction]) -> str:
        """
        Render transactions as statement text

        Args:
            transactions: Transactions in any order of timestamp; those
                sharing a timestamp must be given oldest first

        Returns:
            Statement text, most recent transaction first
        """
        pass
