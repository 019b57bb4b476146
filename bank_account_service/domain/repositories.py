# bank_account_service/domain/repositories.py
"""
Persistence contracts for customers and bank accounts.

Every write is atomic and visible to the next read. Implementations live in
``bank_account_service.infra.db.repositories`` (SQLAlchemy and in-memory).
"""
from abc import ABC, abstractmethod
from typing import List

from bank_account_service.domain.entities.account import BankAccount, Customer


class CustomerRepository(ABC):

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """Insert or replace; assigns ``id`` on first insert."""

    @abstractmethod
    async def find_all(self) -> List[Customer]:
        """All customers ordered by id; empty list when none."""

    @abstractmethod
    async def find_by_id(self, customer_id: int) -> Customer:
        """Raises NotFoundError if absent."""

    @abstractmethod
    async def delete_by_id(self, customer_id: int) -> None:
        """
        Idempotent removal. Raises ValidationError while the customer still
        owns accounts (RESTRICT).
        """


class BankAccountRepository(ABC):

    @abstractmethod
    async def save(self, account: BankAccount) -> BankAccount:
        """
        Insert or replace keyed by ``account.id``. Raises ValidationError when
        ``account.customer`` is missing or not stored.
        """

    @abstractmethod
    async def find_all(self) -> List[BankAccount]:
        """All accounts ordered by (created_at, id)."""

    @abstractmethod
    async def find_by_id(self, account_id: str) -> BankAccount:
        """Raises NotFoundError if absent."""

    @abstractmethod
    async def find_by_customer_id(self, customer_id: int) -> List[BankAccount]:
        """Accounts owned by one customer, same order as find_all."""

    @abstractmethod
    async def delete_by_id(self, account_id: str) -> None:
        """Idempotent: deleting an absent id is a no-op."""
