from .transaction import Transaction
from .account import Account

__all__ = ["Transaction", "Account"]
