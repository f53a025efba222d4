from .account_error import AccountError

__all__ = ["AccountError"]
