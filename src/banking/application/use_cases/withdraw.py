"""
Application Use Case: Withdraw
Debits a stored account and saves the result
"""

from ..commands import Withdraw
from ..ports.account_repository import IAccountRepository
from ..ports.clock import IClock
from .account_use_case import AccountUseCase
from ...domain.entities.account import Account
from ...domain.result import Result


class WithdrawUseCase(AccountUseCase):
    """Use case for withdrawing money"""

    def __init__(self, account_repository: IAccountRepository, clock: IClock):
        super().__init__(account_repository)
        self.clock = clock

    def execute(self, withdraw: Withdraw) -> Result[Account]:
        return self._invoke_when_account_exists(
            withdraw.account_id,
            lambda account: self._save_on_success(
                account.withdraw(self.clock, withdraw.amount)
            )
        )
