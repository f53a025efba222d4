"""
Port: Account Repository Interface
Defines the contract for account storage
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from ...domain.entities.account import Account


class IAccountRepository(ABC):
    """
    Port interface for account storage
    Following Hexagonal Architecture - this is the application layer port
    """

    @abstractmethod
    def find(self, account_id: UUID) -> Optional[Account]:
        """
        Look up an account

        Args:
            account_id: Account identifier

        Returns:
            The stored Account, or None if no account has this id
        """
        pass

    @abstractmethod
    def save(self, account: Account) -> None:
        """
        Store an account, replacing any previous value with the same id

        Args:
            account: Account entity to store
        """
        pass
