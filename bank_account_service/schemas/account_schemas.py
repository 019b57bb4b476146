# bank_account_service/schemas/account_schemas.py
from datetime import datetime

from pydantic import BaseModel, Field

from bank_account_service.domain.entities.account import AccountType, BankAccount


class BankAccountRequest(BaseModel):
    """Fields a caller may set on add/update. Ownership is never part of it."""
    balance: float
    currency: str = Field(..., min_length=1, max_length=10, examples=["MAD"])
    type: AccountType


class BankAccountResponse(BaseModel):
    id: str
    created_at: datetime
    balance: float
    currency: str
    type: AccountType

    @classmethod
    def from_entity(cls, account: BankAccount) -> "BankAccountResponse":
        return cls(
            id=account.id,
            created_at=account.created_at,
            balance=account.balance,
            currency=account.currency,
            type=account.type,
        )
