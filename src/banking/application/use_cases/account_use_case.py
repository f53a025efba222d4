"""
Application Use Case Base: fetch-or-fail on an account
"""

import logging
from typing import Callable, TypeVar
from uuid import UUID

from ..ports.account_repository import IAccountRepository
from ...domain.entities.account import Account
from ...domain.result import Result, Success, unknown_account


logger = logging.getLogger(__name__)

T = TypeVar("T")


class AccountUseCase:
    """Shared behaviour for use cases that act on one stored account"""

    def __init__(self, account_repository: IAccountRepository):
        self.account_repository = account_repository

    def _invoke_when_account_exists(
        self,
        account_id: UUID,
        on_found: Callable[[Account], Result[T]]
    ) -> Result[T]:
        """
        Run on_found against the stored account

        Returns Failure(UNKNOWN_ACCOUNT) without calling on_found when
        the repository has no account for account_id.
        """
        account = self.account_repository.find(account_id)
        if account is None:
            logger.info(f"[{self._name}] account={account_id} not found")
            return unknown_account()
        return on_found(account)

    def _save_on_success(self, result: Result[Account]) -> Result[Account]:
        """Persist the updated account of a successful result"""
        if isinstance(result, Success):
            self.account_repository.save(result.value)
            logger.info(
                f"[{self._name}] account={result.value.id} "
                f"balance={result.value.balance}"
            )
        else:
            logger.info(f"[{self._name}] refused: {result.message}")
        return result

    @property
    def _name(self) -> str:
        return type(self).__name__
