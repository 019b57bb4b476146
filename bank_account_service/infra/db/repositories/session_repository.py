# bank_account_service/infra/db/repositories/session_repository.py
import asyncio
import functools
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession


def serialized(method):
    """Runs the coroutine method while holding the repository's session lock."""

    @functools.wraps(method)
    async def wrapper(self, *args, **kwargs):
        async with self._lock:
            return await method(self, *args, **kwargs)

    return wrapper


class SessionRepository:
    """
    Base for repositories over one AsyncSession.

    An AsyncSession must not be used by concurrent tasks, and GraphQL resolves
    sibling fields concurrently. Repositories sharing a session must share the
    lock too.
    """

    def __init__(self, db: AsyncSession, lock: asyncio.Lock | None = None):
        self._db = db
        self._lock = lock or asyncio.Lock()

    @asynccontextmanager
    async def _writing(self):
        """Commits on exit; rolls back on database errors so the session stays usable."""
        try:
            yield
            await self._db.commit()
        except SQLAlchemyError:
            await self._db.rollback()
            raise
