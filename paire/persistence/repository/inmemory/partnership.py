"""In-memory partnership repository for testing."""

from typing import Optional

from paire.domain.error import PartnershipConflictError
from paire.domain.model import Partnership
from paire.domain.repository.partnership import PartnershipRepository
from paire.domain.value import PartnershipId, UserId

from .store import InMemoryStore


class InMemoryPartnershipRepository(PartnershipRepository):
    """In-memory implementation of PartnershipRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, partnership_id: PartnershipId) -> Optional[Partnership]:
        """Find a partnership by ID."""
        return self._store.partnerships.get(partnership_id)

    async def find_by_user(self, user_id: UserId) -> Optional[Partnership]:
        """Find the partnership a user belongs to."""
        for partnership in self._store.partnerships.values():
            if partnership.involves(user_id):
                return partnership
        return None

    async def create(self, partnership: Partnership) -> Partnership:
        """Create a partnership.

        Raises:
            PartnershipConflictError: If either member already has a partnership
        """
        for user_id in (partnership.user1_id, partnership.user2_id):
            if await self.find_by_user(user_id):
                raise PartnershipConflictError(
                    "One of these users already has a partner"
                )
        self._store.partnerships[partnership.id] = partnership
        return partnership

    async def delete(self, partnership_id: PartnershipId) -> bool:
        """Delete a partnership."""
        return self._store.partnerships.pop(partnership_id, None) is not None
