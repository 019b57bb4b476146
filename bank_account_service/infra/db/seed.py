# bank_account_service/infra/db/seed.py
import logging
import random

from bank_account_service.domain.entities.account import AccountType, BankAccount, Customer
from bank_account_service.domain.repositories import (
    BankAccountRepository,
    CustomerRepository,
)

logger = logging.getLogger(__name__)

SAMPLE_CUSTOMERS = ("Merouane", "Yassine", "Hanae", "Imane")
ACCOUNTS_PER_CUSTOMER = 10
SAMPLE_CURRENCY = "MAD"


async def seed_sample_data(
    customers: CustomerRepository,
    accounts: BankAccountRepository,
    rng: random.Random | None = None,
) -> int:
    """Fills an empty store with sample customers and accounts. Returns accounts created."""
    if await customers.find_all():
        logger.info("Sample data skipped: customers already present")
        return 0

    rng = rng or random.Random()
    for name in SAMPLE_CUSTOMERS:
        await customers.save(Customer(name=name))

    created = 0
    for customer in await customers.find_all():
        for _ in range(ACCOUNTS_PER_CUSTOMER):
            account = BankAccount.open(
                customer=customer,
                balance=rng.random() * 9000,
                currency=SAMPLE_CURRENCY,
                type=AccountType.CURRENT_ACCOUNT if rng.random() > 0.5 else AccountType.SAVING_ACCOUNT,
            )
            await accounts.save(account)
            created += 1

    logger.info(f"Sample data: {len(SAMPLE_CUSTOMERS)} customers, {created} accounts")
    return created
