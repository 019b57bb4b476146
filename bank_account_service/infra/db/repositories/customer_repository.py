# bank_account_service/infra/db/repositories/customer_repository.py
import logging
from typing import List

from sqlalchemy import delete, func, select

from bank_account_service.domain.entities.account import Customer
from bank_account_service.domain.exceptions import NotFoundError, ValidationError
from bank_account_service.domain.repositories import CustomerRepository
from bank_account_service.infra.db.models.account import BankAccountRow
from bank_account_service.infra.db.models.customer import CustomerRow
from bank_account_service.infra.db.repositories.mapping import customer_to_entity
from bank_account_service.infra.db.repositories.session_repository import (
    SessionRepository,
    serialized,
)

logger = logging.getLogger(__name__)


class SqlAlchemyCustomerRepository(SessionRepository, CustomerRepository):

    @serialized
    async def save(self, customer: Customer) -> Customer:
        async with self._writing():
            row = None
            if customer.id is not None:
                row = await self._db.get(CustomerRow, customer.id)
            if row is None:
                row = CustomerRow(id=customer.id, name=customer.name)
                self._db.add(row)
            else:
                row.name = customer.name

        logger.info(f"Customer {row.id} saved")
        return customer_to_entity(row)

    @serialized
    async def find_all(self) -> List[Customer]:
        res = await self._db.execute(select(CustomerRow).order_by(CustomerRow.id))
        return [customer_to_entity(row) for row in res.scalars().all()]

    @serialized
    async def find_by_id(self, customer_id: int) -> Customer:
        row = await self._db.get(CustomerRow, customer_id)
        if row is None:
            raise NotFoundError("Customer", customer_id)
        return customer_to_entity(row)

    @serialized
    async def delete_by_id(self, customer_id: int) -> None:
        owned = await self._db.scalar(
            select(func.count())
            .select_from(BankAccountRow)
            .where(BankAccountRow.customer_id == customer_id)
        )
        if owned:
            raise ValidationError(
                f"Customer {customer_id} still owns {owned} account(s); delete them first"
            )

        async with self._writing():
            res = await self._db.execute(delete(CustomerRow).where(CustomerRow.id == customer_id))
        if res.rowcount:
            logger.info(f"Customer {customer_id} deleted")
