# bank_account_service/domain/entities/account.py
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    CURRENT_ACCOUNT = "CURRENT_ACCOUNT"
    SAVING_ACCOUNT = "SAVING_ACCOUNT"


@dataclass
class Customer:
    name: str
    # Assigned by the store on first save
    id: Optional[int] = None


@dataclass
class BankAccount:
    id: str
    created_at: datetime
    balance: float
    currency: str
    type: AccountType
    customer: Optional[Customer] = None

    @classmethod
    def open(
        cls,
        customer: Customer,
        balance: float,
        currency: str,
        type: AccountType,
    ) -> "BankAccount":
        """New account with a fresh UUID and created_at stamped now (UTC)."""
        return cls(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            balance=balance,
            currency=currency,
            type=type,
            customer=customer,
        )
