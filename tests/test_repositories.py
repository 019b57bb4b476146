"""Persistence contract tests, run against the in-memory and SQLAlchemy backends."""
from datetime import datetime, timedelta, timezone

import pytest

from bank_account_service.domain.entities.account import AccountType, BankAccount, Customer
from bank_account_service.domain.exceptions import NotFoundError, ValidationError


def make_account(owner, account_id, minutes=0, balance=10.0):
    return BankAccount(
        id=account_id,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=minutes),
        balance=balance,
        currency="MAD",
        type=AccountType.CURRENT_ACCOUNT,
        customer=owner,
    )


class TestCustomerRepository:

    async def test_find_all_on_empty_store(self, repos):
        assert await repos.customers.find_all() == []

    async def test_save_assigns_id(self, repos):
        saved = await repos.customers.save(Customer(name="Merouane"))

        assert saved.id is not None
        assert saved.name == "Merouane"

    async def test_find_all_is_ordered_by_id(self, repos):
        first = await repos.customers.save(Customer(name="Merouane"))
        second = await repos.customers.save(Customer(name="Yassine"))

        found = await repos.customers.find_all()

        assert [c.id for c in found] == [first.id, second.id]
        assert second.id != first.id

    async def test_save_existing_replaces(self, repos):
        saved = await repos.customers.save(Customer(name="Imane"))

        await repos.customers.save(Customer(id=saved.id, name="Imane B."))

        assert (await repos.customers.find_by_id(saved.id)).name == "Imane B."
        assert len(await repos.customers.find_all()) == 1

    async def test_find_by_id_missing(self, repos):
        with pytest.raises(NotFoundError):
            await repos.customers.find_by_id(404)

    async def test_delete_is_idempotent(self, repos):
        saved = await repos.customers.save(Customer(name="Hanae"))

        await repos.customers.delete_by_id(saved.id)
        await repos.customers.delete_by_id(saved.id)

        assert await repos.customers.find_all() == []

    async def test_delete_restricted_while_accounts_exist(self, repos):
        owner = await repos.customers.save(Customer(name="Hanae"))
        await repos.accounts.save(make_account(owner, "acc-1"))

        with pytest.raises(ValidationError):
            await repos.customers.delete_by_id(owner.id)

        await repos.accounts.delete_by_id("acc-1")
        await repos.customers.delete_by_id(owner.id)
        assert await repos.customers.find_all() == []


class TestBankAccountRepository:

    async def test_save_and_find_by_id(self, repos):
        owner = await repos.customers.save(Customer(name="Yassine"))
        account = make_account(owner, "acc-1", balance=42.5)

        await repos.accounts.save(account)
        found = await repos.accounts.find_by_id("acc-1")

        assert found == account

    async def test_save_without_customer(self, repos):
        account = make_account(None, "acc-1")

        with pytest.raises(ValidationError):
            await repos.accounts.save(account)

    async def test_save_with_unknown_customer(self, repos):
        account = make_account(Customer(id=999, name="Ghost"), "acc-1")

        with pytest.raises(ValidationError):
            await repos.accounts.save(account)
        assert await repos.accounts.find_all() == []

    async def test_save_replaces_by_id(self, repos):
        owner = await repos.customers.save(Customer(name="Yassine"))
        await repos.accounts.save(make_account(owner, "acc-1", balance=1.0))

        await repos.accounts.save(make_account(owner, "acc-1", balance=2.0))

        accounts = await repos.accounts.find_all()
        assert len(accounts) == 1
        assert accounts[0].balance == 2.0

    async def test_returned_entities_are_detached(self, repos):
        owner = await repos.customers.save(Customer(name="Yassine"))
        await repos.accounts.save(make_account(owner, "acc-1", balance=1.0))

        found = await repos.accounts.find_by_id("acc-1")
        found.balance = 999.0

        assert (await repos.accounts.find_by_id("acc-1")).balance == 1.0

    async def test_find_by_id_missing(self, repos):
        with pytest.raises(NotFoundError, match="Account nope not found"):
            await repos.accounts.find_by_id("nope")

    async def test_delete_then_find_fails(self, repos):
        owner = await repos.customers.save(Customer(name="Imane"))
        await repos.accounts.save(make_account(owner, "acc-1"))

        await repos.accounts.delete_by_id("acc-1")

        with pytest.raises(NotFoundError):
            await repos.accounts.find_by_id("acc-1")

    async def test_delete_absent_is_noop(self, repos):
        await repos.accounts.delete_by_id("never-existed")

        with pytest.raises(NotFoundError):
            await repos.accounts.find_by_id("never-existed")

    async def test_find_all_ordered_by_creation(self, repos):
        owner = await repos.customers.save(Customer(name="Imane"))
        await repos.accounts.save(make_account(owner, "b", minutes=2))
        await repos.accounts.save(make_account(owner, "a", minutes=1))
        await repos.accounts.save(make_account(owner, "c", minutes=2))

        assert [a.id for a in await repos.accounts.find_all()] == ["a", "b", "c"]

    async def test_find_all_counts_adds_minus_deletes(self, repos):
        owner = await repos.customers.save(Customer(name="Imane"))
        for i in range(5):
            await repos.accounts.save(make_account(owner, f"acc-{i}", minutes=i))
        await repos.accounts.delete_by_id("acc-1")
        await repos.accounts.delete_by_id("acc-3")
        await repos.accounts.delete_by_id("acc-3")

        assert [a.id for a in await repos.accounts.find_all()] == ["acc-0", "acc-2", "acc-4"]

    async def test_find_by_customer_id(self, repos):
        merouane = await repos.customers.save(Customer(name="Merouane"))
        hanae = await repos.customers.save(Customer(name="Hanae"))
        await repos.accounts.save(make_account(merouane, "m-1", minutes=1))
        await repos.accounts.save(make_account(hanae, "h-1", minutes=2))
        await repos.accounts.save(make_account(merouane, "m-2", minutes=3))

        owned = await repos.accounts.find_by_customer_id(merouane.id)

        assert [a.id for a in owned] == ["m-1", "m-2"]
        assert all(a.customer == merouane for a in owned)
        assert await repos.accounts.find_by_customer_id(404) == []

    async def test_customer_rename_visible_through_accounts(self, repos):
        owner = await repos.customers.save(Customer(name="Hanae"))
        await repos.accounts.save(make_account(owner, "acc-1"))

        await repos.customers.save(Customer(id=owner.id, name="Hanae E."))

        assert (await repos.accounts.find_by_id("acc-1")).customer.name == "Hanae E."
