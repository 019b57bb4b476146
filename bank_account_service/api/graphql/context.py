# bank_account_service/api/graphql/context.py
import asyncio

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from bank_account_service.domain.repositories import (
    BankAccountRepository,
    CustomerRepository,
)
from bank_account_service.domain.services.account_service import AccountService
from bank_account_service.infra.db.repositories.account_repository import (
    SqlAlchemyBankAccountRepository,
)
from bank_account_service.infra.db.repositories.customer_repository import (
    SqlAlchemyCustomerRepository,
)
from bank_account_service.infra.db.session import get_db


class BankContext(BaseContext):
    """What every resolver gets through ``info.context``."""

    def __init__(self, customers: CustomerRepository, accounts: BankAccountRepository):
        super().__init__()
        self.customers = customers
        self.accounts = accounts
        self.account_service = AccountService(accounts, customers)


async def get_context(db: AsyncSession = Depends(get_db)) -> BankContext:
    # Resolvers run concurrently; both repositories queue on the same session lock
    lock = asyncio.Lock()
    return BankContext(
        customers=SqlAlchemyCustomerRepository(db, lock),
        accounts=SqlAlchemyBankAccountRepository(db, lock),
    )
