from .account_use_case import AccountUseCase
from .deposit import DepositUseCase
from .withdraw import WithdrawUseCase
from .print_statement import PrintStatementUseCase

__all__ = [
    "AccountUseCase",
    "DepositUseCase",
    "WithdrawUseCase",
    "PrintStatementUseCase",
]
