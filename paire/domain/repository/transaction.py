"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Groups repository writes that must land together.

    Writes made inside ``atomic()`` are discarded if the block raises; the
    rest of the request's writes are unaffected.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an all-or-nothing block.

        Usage:
            async with transactions.atomic():
                await invitation_service.consume(...)
                await partnership_service.link(...)
        """
        pass
