# bank_account_service/infra/db/repositories/mapping.py
"""Row <-> entity conversion for the SQLAlchemy repositories."""
from datetime import datetime, timezone

from bank_account_service.domain.entities.account import BankAccount, Customer
from bank_account_service.infra.db.models.account import BankAccountRow
from bank_account_service.infra.db.models.customer import CustomerRow


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything stored is UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def customer_to_entity(row: CustomerRow) -> Customer:
    return Customer(id=row.id, name=row.name)


def account_to_entity(row: BankAccountRow, owner: CustomerRow) -> BankAccount:
    return BankAccount(
        id=row.id,
        created_at=as_utc(row.created_at),
        balance=row.balance,
        currency=row.currency,
        type=row.type,
        customer=customer_to_entity(owner),
    )


def copy_account_to_row(account: BankAccount, row: BankAccountRow, customer_id: int) -> None:
    row.created_at = account.created_at
    row.balance = account.balance
    row.currency = account.currency
    row.type = account.type
    row.customer_id = customer_id
