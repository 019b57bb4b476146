# bank_account_service/infra/db/repositories/account_repository.py
import logging
from typing import List

from sqlalchemy import delete, select

from bank_account_service.domain.entities.account import BankAccount
from bank_account_service.domain.exceptions import NotFoundError, ValidationError
from bank_account_service.domain.repositories import BankAccountRepository
from bank_account_service.infra.db.models.account import BankAccountRow
from bank_account_service.infra.db.models.customer import CustomerRow
from bank_account_service.infra.db.repositories.mapping import (
    account_to_entity,
    copy_account_to_row,
)
from bank_account_service.infra.db.repositories.session_repository import (
    SessionRepository,
    serialized,
)

logger = logging.getLogger(__name__)


class SqlAlchemyBankAccountRepository(SessionRepository, BankAccountRepository):

    def _select_with_owner(self):
        return (
            select(BankAccountRow, CustomerRow)
            .join(CustomerRow, BankAccountRow.customer_id == CustomerRow.id)
            .order_by(BankAccountRow.created_at, BankAccountRow.id)
        )

    @serialized
    async def save(self, account: BankAccount) -> BankAccount:
        if account.customer is None or account.customer.id is None:
            raise ValidationError(f"Account {account.id} has no owning customer")

        owner = await self._db.get(CustomerRow, account.customer.id)
        if owner is None:
            raise ValidationError(
                f"Account {account.id} references unknown customer {account.customer.id}"
            )

        async with self._writing():
            row = await self._db.get(BankAccountRow, account.id)
            if row is None:
                row = BankAccountRow(id=account.id)
                self._db.add(row)
            copy_account_to_row(account, row, owner.id)

        logger.info(f"Account {row.id} saved for customer {owner.id}")
        return account_to_entity(row, owner)

    @serialized
    async def find_all(self) -> List[BankAccount]:
        res = await self._db.execute(self._select_with_owner())
        return [account_to_entity(row, owner) for row, owner in res.all()]

    @serialized
    async def find_by_id(self, account_id: str) -> BankAccount:
        res = await self._db.execute(
            self._select_with_owner().where(BankAccountRow.id == account_id)
        )
        found = res.first()
        if found is None:
            raise NotFoundError("Account", account_id)
        row, owner = found
        return account_to_entity(row, owner)

    @serialized
    async def find_by_customer_id(self, customer_id: int) -> List[BankAccount]:
        res = await self._db.execute(
            self._select_with_owner().where(BankAccountRow.customer_id == customer_id)
        )
        return [account_to_entity(row, owner) for row, owner in res.all()]

    @serialized
    async def delete_by_id(self, account_id: str) -> None:
        async with self._writing():
            res = await self._db.execute(delete(BankAccountRow).where(BankAccountRow.id == account_id))
        if res.rowcount:
            logger.info(f"Account {account_id} deleted")
