# bank_account_service/infra/db/repositories/memory.py
"""
Dict-backed repositories sharing one ``InMemoryStore``.

Entities are copied on the way in and out so callers never hold a reference
into the store, the same as reading rows back from a database.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List

from bank_account_service.domain.entities.account import BankAccount, Customer
from bank_account_service.domain.exceptions import NotFoundError, ValidationError
from bank_account_service.domain.repositories import (
    BankAccountRepository,
    CustomerRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class InMemoryStore:
    customers: Dict[int, Customer] = field(default_factory=dict)
    # account id -> (account without owner, owning customer id)
    accounts: Dict[str, tuple] = field(default_factory=dict)
    next_customer_id: int = 1


class InMemoryCustomerRepository(CustomerRepository):

    def __init__(self, store: InMemoryStore):
        self._store = store

    async def save(self, customer: Customer) -> Customer:
        customer_id = customer.id
        if customer_id is None:
            customer_id = self._store.next_customer_id
        self._store.next_customer_id = max(self._store.next_customer_id, customer_id + 1)

        self._store.customers[customer_id] = Customer(id=customer_id, name=customer.name)
        logger.info(f"Customer {customer_id} saved")
        return Customer(id=customer_id, name=customer.name)

    async def find_all(self) -> List[Customer]:
        return [replace(c) for _, c in sorted(self._store.customers.items())]

    async def find_by_id(self, customer_id: int) -> Customer:
        customer = self._store.customers.get(customer_id)
        if customer is None:
            raise NotFoundError("Customer", customer_id)
        return replace(customer)

    async def delete_by_id(self, customer_id: int) -> None:
        owned = sum(1 for _, owner_id in self._store.accounts.values() if owner_id == customer_id)
        if owned:
            raise ValidationError(
                f"Customer {customer_id} still owns {owned} account(s); delete them first"
            )
        if self._store.customers.pop(customer_id, None) is not None:
            logger.info(f"Customer {customer_id} deleted")


class InMemoryBankAccountRepository(BankAccountRepository):

    def __init__(self, store: InMemoryStore):
        self._store = store

    def _load(self, account: BankAccount, owner_id: int) -> BankAccount:
        return replace(account, customer=replace(self._store.customers[owner_id]))

    def _ordered(self, accounts) -> List[BankAccount]:
        return sorted(accounts, key=lambda a: (a.created_at, a.id))

    async def save(self, account: BankAccount) -> BankAccount:
        if account.customer is None or account.customer.id is None:
            raise ValidationError(f"Account {account.id} has no owning customer")
        owner_id = account.customer.id
        if owner_id not in self._store.customers:
            raise ValidationError(
                f"Account {account.id} references unknown customer {owner_id}"
            )

        self._store.accounts[account.id] = (replace(account, customer=None), owner_id)
        logger.info(f"Account {account.id} saved for customer {owner_id}")
        return self._load(account, owner_id)

    async def find_all(self) -> List[BankAccount]:
        return self._ordered(
            self._load(account, owner_id) for account, owner_id in self._store.accounts.values()
        )

    async def find_by_id(self, account_id: str) -> BankAccount:
        stored = self._store.accounts.get(account_id)
        if stored is None:
            raise NotFoundError("Account", account_id)
        account, owner_id = stored
        return self._load(account, owner_id)

    async def find_by_customer_id(self, customer_id: int) -> List[BankAccount]:
        return self._ordered(
            self._load(account, owner_id)
            for account, owner_id in self._store.accounts.values()
            if owner_id == customer_id
        )

    async def delete_by_id(self, account_id: str) -> None:
        if self._store.accounts.pop(account_id, None) is not None:
            logger.info(f"Account {account_id} deleted")
