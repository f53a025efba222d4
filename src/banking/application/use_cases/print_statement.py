"""
Application Use Case: Print Statement
Formats an account's transactions and sends them to the printer
"""

import logging

from ..commands import PrintStatement
from ..ports.account_repository import IAccountRepository
from ..ports.statement_formatter import IStatementFormatter
from ..ports.statement_printer import IStatementPrinter
from .account_use_case import AccountUseCase
from ...domain.entities.account import Account
from ...domain.result import Result, Success


logger = logging.getLogger(__name__)


class PrintStatementUseCase(AccountUseCase):
    """Use case for printing a statement"""

    def __init__(
        self,
        account_repository: IAccountRepository,
        printer: IStatementPrinter,
        statement_formatter: IStatementFormatter
    ):
        """Initialize use case with dependencies"""
        super().__init__(account_repository)
        self.printer = printer
        self.statement_formatter = statement_formatter

    def execute(self, print_statement: PrintStatement) -> Result[None]:
        """Print the statement; the repository is never written to"""
        return self._invoke_when_account_exists(
            print_statement.account_id,
            self._print
        )

    def _print(self, account: Account) -> Result[None]:
        self.printer.write(account.to_statement(self.statement_formatter))
        logger.info(
            f"[PrintStatementUseCase] account={account.id} "
            f"transactions={len(account.transactions)}"
        )
        return Success(None)
