# bank_account_service/domain/services/account_service.py
import logging

from bank_account_service.domain.entities.account import BankAccount, Customer
from bank_account_service.domain.exceptions import NotFoundError, ValidationError
from bank_account_service.domain.repositories import (
    BankAccountRepository,
    CustomerRepository,
)
from bank_account_service.schemas.account_schemas import (
    BankAccountRequest,
    BankAccountResponse,
)

logger = logging.getLogger(__name__)


class AccountService:
    """
    Create/update orchestration between request DTOs and entities.

    The owning customer is fixed when the account is added; update only
    touches balance, currency and type.
    """

    def __init__(self, accounts: BankAccountRepository, customers: CustomerRepository):
        self._accounts = accounts
        self._customers = customers

    async def add_account(self, customer_id: int, request: BankAccountRequest) -> BankAccountResponse:
        try:
            owner = await self._customers.find_by_id(customer_id)
        except NotFoundError:
            raise ValidationError(f"Customer {customer_id} not found; an account needs an existing owner")

        account = BankAccount.open(
            customer=owner,
            balance=request.balance,
            currency=request.currency,
            type=request.type,
        )
        saved = await self._accounts.save(account)
        logger.info(f"Account {saved.id} opened for customer {owner.id}")
        return BankAccountResponse.from_entity(saved)

    async def update_account(self, account_id: str, request: BankAccountRequest) -> BankAccountResponse:
        account = await self._accounts.find_by_id(account_id)

        account.balance = request.balance
        account.currency = request.currency
        account.type = request.type

        saved = await self._accounts.save(account)
        return BankAccountResponse.from_entity(saved)

    async def add_customer(self, name: str) -> Customer:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Customer name must not be blank")
        return await self._customers.save(Customer(name=name))
