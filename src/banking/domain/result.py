"""
Domain Result Values
Business failures are returned, never raised
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .enums import AccountError


T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying its value"""

    value: T


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying the error kind and a readable message"""

    error: AccountError
    message: str


Result = Union[Success[T], Failure]


def unknown_account() -> Failure:
    return Failure(AccountError.UNKNOWN_ACCOUNT, "Unknown account")
