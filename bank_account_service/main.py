# bank_account_service/main.py
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from strawberry.fastapi import GraphQLRouter

from bank_account_service.api.graphql.context import get_context
from bank_account_service.api.graphql.schema import schema
from bank_account_service.api.v1.router import api_router_v1
from bank_account_service.core.config import Settings, settings as default_settings
from bank_account_service.core.logging import setup_logging
from bank_account_service.infra.db.repositories.account_repository import (
    SqlAlchemyBankAccountRepository,
)
from bank_account_service.infra.db.repositories.customer_repository import (
    SqlAlchemyCustomerRepository,
)
from bank_account_service.infra.db.seed import seed_sample_data
from bank_account_service.infra.db.session import build_engine, build_session_factory, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    cfg = app.state.settings
    await init_db(app.state.engine)
    if cfg.SEED_SAMPLE_DATA:
        async with app.state.session_factory() as session:
            lock = asyncio.Lock()
            await seed_sample_data(
                SqlAlchemyCustomerRepository(session, lock),
                SqlAlchemyBankAccountRepository(session, lock),
            )
    logger.info(f"{cfg.PROJECT_NAME} {cfg.PROJECT_VERSION} ready ({cfg.ENVIRONMENT})")
    yield
    await app.state.engine.dispose()


def create_app(
    settings: Optional[Settings] = None,
    context_getter: Optional[Callable] = None,
) -> FastAPI:
    """
    Builds the application. ``context_getter`` replaces the database-backed
    GraphQL context, e.g. with in-memory repositories.
    """
    cfg = settings or default_settings
    setup_logging(cfg.LOG_LEVEL)

    app = FastAPI(
        title=cfg.PROJECT_NAME,
        version=cfg.PROJECT_VERSION,
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.engine = build_engine(cfg.DATABASE_URL, echo=cfg.DB_ECHO)
    app.state.session_factory = build_session_factory(app.state.engine)

    # Rate limiting
    app.state.limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[cfg.RATE_LIMIT],
        storage_uri=cfg.RATE_LIMIT_STORAGE_URI,
        enabled=cfg.RATE_LIMIT_ENABLED,
    )
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Routers
    graphql_router = GraphQLRouter(
        schema,
        context_getter=context_getter or get_context,
        graphql_ide="graphiql" if cfg.GRAPHIQL_ENABLED else None,
    )
    app.include_router(graphql_router, prefix=cfg.GRAPHQL_PATH)
    app.include_router(api_router_v1)

    @app.get("/")
    async def root():
        return {"service": cfg.PROJECT_NAME, "status": "ok", "graphql": cfg.GRAPHQL_PATH}

    return app


def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": "Rate limit exceeded", "error": str(exc)},
    )


app = create_app()
