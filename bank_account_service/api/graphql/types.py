# bank_account_service/api/graphql/types.py
from datetime import datetime
from typing import List

import strawberry
from pydantic import ValidationError as PydanticValidationError
from strawberry.types import Info

from bank_account_service.domain.entities.account import AccountType, BankAccount, Customer
from bank_account_service.domain.exceptions import ValidationError
from bank_account_service.schemas.account_schemas import (
    BankAccountRequest,
    BankAccountResponse,
)

strawberry.enum(AccountType, name="AccountType")


@strawberry.type(name="Customer")
class CustomerType:
    id: int
    name: str

    @strawberry.field
    async def accounts(self, info: Info) -> List["BankAccountType"]:
        owned = await info.context.accounts.find_by_customer_id(self.id)
        return [BankAccountType.from_entity(a) for a in owned]

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerType":
        return cls(id=customer.id, name=customer.name)


@strawberry.type(name="BankAccount")
class BankAccountType:
    id: strawberry.ID
    created_at: datetime
    balance: float
    currency: str
    type: AccountType
    customer: CustomerType

    @classmethod
    def from_entity(cls, account: BankAccount) -> "BankAccountType":
        return cls(
            id=strawberry.ID(account.id),
            created_at=account.created_at,
            balance=account.balance,
            currency=account.currency,
            type=account.type,
            customer=CustomerType.from_entity(account.customer),
        )


@strawberry.type(name="BankAccountResponse")
class BankAccountResponseType:
    id: strawberry.ID
    created_at: datetime
    balance: float
    currency: str
    type: AccountType

    @classmethod
    def from_response(cls, response: BankAccountResponse) -> "BankAccountResponseType":
        return cls(
            id=strawberry.ID(response.id),
            created_at=response.created_at,
            balance=response.balance,
            currency=response.currency,
            type=response.type,
        )


@strawberry.input(name="BankAccountRequest")
class BankAccountRequestInput:
    balance: float
    currency: str
    type: AccountType

    def to_request(self) -> BankAccountRequest:
        try:
            return BankAccountRequest(balance=self.balance, currency=self.currency, type=self.type)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid bank account request: {e.errors()[0]['msg']}")
