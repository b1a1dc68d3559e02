"""PostgreSQL transaction manager."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from paire.domain.repository.transaction import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Runs atomic blocks in a savepoint of the request session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
