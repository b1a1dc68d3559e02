"""Partnership repository interface."""

from abc import ABC, abstractmethod

from paire.domain.model.partnership import Partnership
from paire.domain.value import PartnershipId, UserId


class PartnershipRepository(ABC):
    """Repository for Partnership entity."""

    @abstractmethod
    async def find_by_id(self, partnership_id: PartnershipId) -> Partnership | None:
        """Find a partnership by ID.

        Args:
            partnership_id: The partnership's unique identifier

        Returns:
            The partnership if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Partnership | None:
        """Find the partnership a user belongs to.

        Args:
            user_id: Either member's ID

        Returns:
            The partnership if the user has one, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, partnership: Partnership) -> Partnership:
        """Persist a new partnership.

        Args:
            partnership: The partnership to create

        Returns:
            The created partnership

        Raises:
            PartnershipConflictError: If either member already has a partnership
        """
        pass

    @abstractmethod
    async def delete(self, partnership_id: PartnershipId) -> bool:
        """Delete a partnership, freeing both members.

        Args:
            partnership_id: Partnership to delete

        Returns:
            True if a partnership was deleted
        """
        pass
