"""In-memory transaction manager for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from paire.domain.repository.transaction import TransactionManager

from .store import InMemoryStore


class InMemoryTransactionManager(TransactionManager):
    """Restores the invitation and partnership tables when a block raises.

    Stored models are replaced, never mutated, so a shallow copy of each
    table is a complete snapshot.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        invitations = dict(self._store.invitations)
        partnerships = dict(self._store.partnerships)
        try:
            yield
        except BaseException:
            self._store.invitations.clear()
            self._store.invitations.update(invitations)
            self._store.partnerships.clear()
            self._store.partnerships.update(partnerships)
            raise
