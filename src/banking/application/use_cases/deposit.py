"""
Application Use Case: Deposit
Credits a stored account and saves the result
"""

from ..commands import Deposit
from ..ports.account_repository import IAccountRepository
from ..ports.clock import IClock
from .account_use_case import AccountUseCase
from ...domain.entities.account import Account
from ...domain.result import Result


class DepositUseCase(AccountUseCase):
    """Use case for depositing money"""

    def __init__(self, account_repository: IAccountRepository, clock: IClock):
        """Initialize use case with dependencies"""
        super().__init__(account_repository)
        self.clock = clock

    def execute(self, deposit: Deposit) -> Result[Account]:
        """
        Execute the deposit

        Returns:
            Success with the saved account, or the Failure untouched;
            nothing is saved on failure
        """
        return self._invoke_when_account_exists(
            deposit.account_id,
            lambda account: self._save_on_success(
                account.deposit(self.clock, deposit.amount)
            )
        )
