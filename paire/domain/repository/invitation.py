"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from paire.domain.model.invitation import Invitation
from paire.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find an invitation by token, whatever its status.

        Used when a user opens an invitation link.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_for_invitee(
        self, email: Email, now: datetime
    ) -> list[Invitation]:
        """Find live invitations addressed to an email.

        Live means ``status == pending`` and ``expires_at > now``.

        Args:
            email: Invitee email
            now: Reference time for expiry

        Returns:
            Matching invitations, newest first
        """
        pass

    @abstractmethod
    async def exists_pending_for_pair(
        self, inviter_id: UserId, invitee_email: Email, now: datetime
    ) -> bool:
        """Check whether the inviter already has a live invitation to the email.

        Args:
            inviter_id: The inviter's ID
            invitee_email: Invitee email
            now: Reference time for expiry

        Returns:
            True if a pending, unexpired invitation exists
        """
        pass

    @abstractmethod
    async def find_by_inviter(
        self, inviter_id: UserId, limit: int = 50, offset: int = 0
    ) -> list[Invitation]:
        """Find invitations sent by a user, newest first.

        Args:
            inviter_id: The inviter's ID
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invitations
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation
        """
        pass

    @abstractmethod
    async def transition_status(
        self,
        invitation_id: InvitationId,
        new_status: InvitationStatus,
        accepted_by_user_id: UserId | None = None,
        accepted_at: datetime | None = None,
    ) -> bool:
        """Move a PENDING invitation to ``new_status``.

        The transition only applies while the stored status is still
        PENDING, so concurrent callers cannot both consume one token.

        Args:
            invitation_id: Invitation to update
            new_status: Target status
            accepted_by_user_id: Accepting user (ACCEPTED only)
            accepted_at: Acceptance time (ACCEPTED only)

        Returns:
            True if this call performed the transition, False if the
            invitation was no longer pending
        """
        pass
