# bank_account_service/api/graphql/schema.py
import logging
from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext, Info

from bank_account_service.api.graphql.types import (
    BankAccountRequestInput,
    BankAccountResponseType,
    BankAccountType,
    CustomerType,
)
from bank_account_service.domain.exceptions import BankAccountServiceError

logger = logging.getLogger(__name__)


@strawberry.type
class Query:

    @strawberry.field
    async def accounts_list(self, info: Info) -> List[BankAccountType]:
        accounts = await info.context.accounts.find_all()
        return [BankAccountType.from_entity(a) for a in accounts]

    @strawberry.field
    async def bank_account_by_id(self, info: Info, id: strawberry.ID) -> BankAccountType:
        account = await info.context.accounts.find_by_id(str(id))
        return BankAccountType.from_entity(account)

    @strawberry.field
    async def customers(self, info: Info) -> List[CustomerType]:
        customers = await info.context.customers.find_all()
        return [CustomerType.from_entity(c) for c in customers]

    @strawberry.field
    async def customer_by_id(self, info: Info, id: int) -> CustomerType:
        customer = await info.context.customers.find_by_id(id)
        return CustomerType.from_entity(customer)


@strawberry.type
class Mutation:

    @strawberry.mutation
    async def add_account(
        self,
        info: Info,
        customer_id: int,
        bank_account: BankAccountRequestInput,
    ) -> BankAccountResponseType:
        response = await info.context.account_service.add_account(
            customer_id, bank_account.to_request()
        )
        return BankAccountResponseType.from_response(response)

    @strawberry.mutation
    async def update_account(
        self,
        info: Info,
        id: strawberry.ID,
        bank_account: BankAccountRequestInput,
    ) -> BankAccountResponseType:
        response = await info.context.account_service.update_account(
            str(id), bank_account.to_request()
        )
        return BankAccountResponseType.from_response(response)

    @strawberry.mutation
    async def delete_account(self, info: Info, id: strawberry.ID) -> bool:
        await info.context.accounts.delete_by_id(str(id))
        return True

    @strawberry.mutation
    async def add_customer(self, info: Info, name: str) -> CustomerType:
        customer = await info.context.account_service.add_customer(name)
        return CustomerType.from_entity(customer)

    @strawberry.mutation
    async def delete_customer(self, info: Info, id: int) -> bool:
        await info.context.customers.delete_by_id(id)
        return True


class BankSchema(strawberry.Schema):

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        # Domain errors are expected outcomes: no traceback
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, BankAccountServiceError):
                logger.warning(f"{error.original_error.code}: {error.message}")
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = BankSchema(query=Query, mutation=Mutation)
