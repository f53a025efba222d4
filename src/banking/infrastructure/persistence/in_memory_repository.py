"""
Infrastructure Adapter: In-Memory Account Repository
Implements IAccountRepository with a dict keyed by account id
"""

import logging
import uuid
from typing import Optional
from uuid import UUID

from ...application.ports.account_repository import IAccountRepository
from ...domain.entities.account import Account


logger = logging.getLogger(__name__)


class InMemoryAccountRepository(IAccountRepository):
    """Process-local account storage, lost on exit"""

    def __init__(self, *existing_accounts: UUID):
        """Seed an empty account for each given id"""
        self._accounts: dict[UUID, Account] = {
            account_id: Account(account_id) for account_id in existing_accounts
        }

    def find(self, account_id: UUID) -> Optional[Account]:
        return self._accounts.get(account_id)

    def save(self, account: Account) -> None:
        self._accounts[account.id] = account
        logger.debug(
            f"[save] account={account.id} transactions={len(account.transactions)}"
        )

    def open_account(self, account_id: Optional[UUID] = None) -> Account:
        """
        Create and store an empty account

        Args:
            account_id: Identifier to use; a random uuid4 when omitted

        Returns:
            The stored account (the existing one if the id is already known)
        """
        account_id = account_id or uuid.uuid4()
        account = self._accounts.get(account_id)
        if account is None:
            account = Account(account_id)
            self._accounts[account_id] = account
            logger.info(f"[open_account] account={account_id}")
        return account
