from .account_repository import IAccountRepository
from .clock import IClock
from .statement_formatter import IStatementFormatter
from .statement_printer import IStatementPrinter

__all__ = [
    "IAccountRepository",
    "IClock",
    "IStatementFormatter",
    "IStatementPrinter",
]
