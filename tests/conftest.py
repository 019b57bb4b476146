"""Shared pytest fixtures for all tests."""
import asyncio
from collections import namedtuple

import httpx
import pytest

from bank_account_service.api.graphql.context import BankContext
from bank_account_service.core.config import Settings
from bank_account_service.domain.services.account_service import AccountService
from bank_account_service.infra.db.repositories.account_repository import (
    SqlAlchemyBankAccountRepository,
)
from bank_account_service.infra.db.repositories.customer_repository import (
    SqlAlchemyCustomerRepository,
)
from bank_account_service.infra.db.repositories.memory import (
    InMemoryBankAccountRepository,
    InMemoryCustomerRepository,
    InMemoryStore,
)
from bank_account_service.infra.db.session import build_engine, build_session_factory, init_db
from bank_account_service.main import create_app

Repos = namedtuple("Repos", ["customers", "accounts"])

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_session():
    """AsyncSession over a fresh in-memory SQLite database with the schema created."""
    engine = build_engine(SQLITE_MEMORY_URL)
    await init_db(engine)
    async with build_session_factory(engine)() as session:
        yield session
    await engine.dispose()


@pytest.fixture(params=["memory", "sqlalchemy"])
def repos(request, db_session):
    """Customer/account repositories, once per storage backend."""
    if request.param == "memory":
        store = InMemoryStore()
        return Repos(InMemoryCustomerRepository(store), InMemoryBankAccountRepository(store))
    lock = asyncio.Lock()
    return Repos(
        SqlAlchemyCustomerRepository(db_session, lock),
        SqlAlchemyBankAccountRepository(db_session, lock),
    )


@pytest.fixture
def service(repos):
    return AccountService(repos.accounts, repos.customers)


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        DATABASE_URL=SQLITE_MEMORY_URL,
        RATE_LIMIT_ENABLED=False,
        SEED_SAMPLE_DATA=False,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def api_repos():
    """In-memory repositories backing the API under test."""
    store = InMemoryStore()
    return Repos(InMemoryCustomerRepository(store), InMemoryBankAccountRepository(store))


@pytest.fixture
async def client(test_settings, api_repos):
    async def context_getter() -> BankContext:
        return BankContext(customers=api_repos.customers, accounts=api_repos.accounts)

    app = create_app(test_settings, context_getter=context_getter)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    await app.state.engine.dispose()


@pytest.fixture
def graphql(client):
    """Posts a GraphQL document and returns the decoded JSON body."""

    async def execute(query: str, variables: dict | None = None) -> dict:
        response = await client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert response.status_code == 200
        return response.json()

    return execute
