"""
Application Commands: Pydantic models for use case input
"""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Deposit(BaseModel):
    """Credit an account"""

    model_config = ConfigDict(frozen=True)

    account_id: UUID = Field(..., description="Target account identifier")
    amount: Decimal = Field(..., description="Amount to credit")


class Withdraw(BaseModel):
    """Debit an account"""

    model_config = ConfigDict(frozen=True)

    account_id: UUID = Field(..., description="Target account identifier")
    amount: Decimal = Field(..., description="Amount to debit")


class PrintStatement(BaseModel):
    """Print the statement of an account"""

    model_config = ConfigDict(frozen=True)

    account_id: UUID = Field(..., description="Account identifier")
