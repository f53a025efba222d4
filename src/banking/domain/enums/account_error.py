"""Account Error Enumeration

Closed set of business failures returned by accounts and use cases.
"""

from enum import Enum


class AccountError(str, Enum):
    """Account error classification

    UNKNOWN_ACCOUNT: No account stored under the requested id
    INVALID_AMOUNT: Deposit or withdrawal amount is not strictly positive
    INSUFFICIENT_FUNDS: Withdrawal exceeds the current balance
    """

    UNKNOWN_ACCOUNT = "unknown_account"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"

    def __str__(self) -> str:
        return self.value
