"""
Dependency Injection Container
"""

from functools import lru_cache
from typing import Optional

from rich.console import Console

from .application.ports.account_repository import IAccountRepository
from .application.ports.clock import IClock
from .application.ports.statement_formatter import IStatementFormatter
from .application.ports.statement_printer import IStatementPrinter
from .application.use_cases.deposit import DepositUseCase
from .application.use_cases.withdraw import WithdrawUseCase
from .application.use_cases.print_statement import PrintStatementUseCase
from .infrastructure.clock.system_clock import SystemClock
from .infrastructure.console.console_printer import ConsoleStatementPrinter
from .infrastructure.formatting.text_formatter import TextStatementFormatter
from .infrastructure.persistence.in_memory_repository import InMemoryAccountRepository
from .config import settings


# Global repository instance shared by every use case in the process
_repository_instance: InMemoryAccountRepository | None = None


def get_account_repository() -> InMemoryAccountRepository:
    """Get the process-wide account repository"""
    global _repository_instance

    if _repository_instance is None:
        _repository_instance = InMemoryAccountRepository()

    return _repository_instance


def reset_account_repository() -> None:
    """Drop every stored account"""
    global _repository_instance
    _repository_instance = None


@lru_cache()
def get_clock() -> IClock:
    return SystemClock()


@lru_cache()
def get_statement_formatter() -> IStatementFormatter:
    return TextStatementFormatter(date_format=settings.STATEMENT_DATE_FORMAT)


def get_statement_printer(console: Optional[Console] = None) -> IStatementPrinter:
    return ConsoleStatementPrinter(console)


def get_deposit_use_case(
    repository: Optional[IAccountRepository] = None,
    clock: Optional[IClock] = None
) -> DepositUseCase:
    """Get deposit use case with injected dependencies"""
    return DepositUseCase(
        repository if repository is not None else get_account_repository(),
        clock if clock is not None else get_clock()
    )


def get_withdraw_use_case(
    repository: Optional[IAccountRepository] = None,
    clock: Optional[IClock] = None
) -> WithdrawUseCase:
    """Get withdraw use case with injected dependencies"""
    return WithdrawUseCase(
        repository if repository is not None else get_account_repository(),
        clock if clock is not None else get_clock()
    )


def get_print_statement_use_case(
    repository: Optional[IAccountRepository] = None,
    printer: Optional[IStatementPrinter] = None,
    statement_formatter: Optional[IStatementFormatter] = None
) -> PrintStatementUseCase:
    """Get print statement use case with injected dependencies"""
    return PrintStatementUseCase(
        repository if repository is not None else get_account_repository(),
        printer if printer is not None else get_statement_printer(),
        statement_formatter if statement_formatter is not None else get_statement_formatter()
    )
