"""Partnership domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from paire.domain.error import NotFoundError, PartnershipConflictError
from paire.domain.model import Partnership
from paire.domain.model.common import utcnow
from paire.domain.repository import PartnershipRepository
from paire.domain.value import PartnershipId, UserId

from .base import Service


class PartnershipService(Service):
    """Domain service for partnership lifecycle.

    Enforces that a user belongs to at most one partnership. The repository
    enforces the same rule atomically; checks here give callers a precise
    error before any write.
    """

    def __init__(self, partnership_repository: PartnershipRepository) -> None:
        """Initialize partnership service.

        Args:
            partnership_repository: Partnership repository
        """
        self.partnership_repository = partnership_repository

    async def get_for_user(self, user_id: UserId) -> Partnership | None:
        """Get the user's partnership.

        Args:
            user_id: Either member's ID

        Returns:
            The partnership, or None when the user is unlinked
        """
        with logfire.span("partnership_service.get_for_user", user_id=str(user_id)):
            partnership = await self.partnership_repository.find_by_user(user_id)
            logfire.info(
                "Partnership lookup",
                user_id=str(user_id),
                linked=partnership is not None,
            )
            return partnership

    async def ensure_unlinked(self, user_id: UserId, message: str) -> None:
        """Raise if the user already has a partnership.

        Raises:
            PartnershipConflictError: If the user is linked
        """
        if await self.partnership_repository.find_by_user(user_id):
            raise PartnershipConflictError(message)

    async def link(
        self, inviter_id: UserId, invitee_id: UserId, now: datetime | None = None
    ) -> Partnership:
        """Create a partnership between inviter (user1) and invitee (user2).

        Args:
            inviter_id: User who sent the invitation
            invitee_id: User who accepted it
            now: Creation time

        Returns:
            Created partnership

        Raises:
            PartnershipConflictError: If either user is already linked
        """
        now = now or utcnow()
        with logfire.span(
            "partnership_service.link",
            inviter_id=str(inviter_id),
            invitee_id=str(invitee_id),
        ):
            if inviter_id == invitee_id:
                raise PartnershipConflictError("A user cannot partner with themselves")

            await self.ensure_unlinked(inviter_id, "The inviter already has a partner")
            await self.ensure_unlinked(invitee_id, "You already have a partner")

            partnership = Partnership(
                id=PartnershipId(uuid4()),
                user1_id=inviter_id,
                user2_id=invitee_id,
                created_at=now,
                updated_at=now,
            )
            created = await self.partnership_repository.create(partnership)
            logfire.info(
                "Partnership created",
                partnership_id=str(created.id),
                user1_id=str(inviter_id),
                user2_id=str(invitee_id),
            )
            return created

    async def end(self, partnership_id: PartnershipId, user_id: UserId) -> None:
        """End a partnership. Either member may end it.

        Args:
            partnership_id: Partnership to end
            user_id: Requesting user

        Raises:
            NotFoundError: If no such partnership includes the user
        """
        with logfire.span(
            "partnership_service.end",
            partnership_id=str(partnership_id),
            user_id=str(user_id),
        ):
            partnership = await self.partnership_repository.find_by_id(partnership_id)
            # Non-members get the same answer as a missing id
            if not partnership or not partnership.involves(user_id):
                logfire.warn(
                    "Partnership not found for user",
                    partnership_id=str(partnership_id),
                    user_id=str(user_id),
                )
                raise NotFoundError("Partnership", str(partnership_id))

            deleted = await self.partnership_repository.delete(partnership_id)
            if not deleted:
                raise NotFoundError("Partnership", str(partnership_id))

            logfire.info(
                "Partnership ended",
                partnership_id=str(partnership_id),
                user_id=str(user_id),
            )
