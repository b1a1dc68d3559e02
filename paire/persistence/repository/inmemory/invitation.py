"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional

from paire.domain.model import Invitation
from paire.domain.repository.invitation import InvitationRepository
from paire.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)

from .store import InMemoryStore


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        return self._store.invitations.get(invitation_id)

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        for invitation in self._store.invitations.values():
            if invitation.token == token:
                return invitation
        return None

    async def find_pending_for_invitee(
        self, email: Email, now: datetime
    ) -> list[Invitation]:
        """Find live invitations addressed to an email, newest first."""
        matches = [
            invitation
            for invitation in self._store.invitations.values()
            if invitation.invitee_email == email
            and invitation.status == InvitationStatus.PENDING
            and invitation.expires_at > now
        ]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches

    async def exists_pending_for_pair(
        self, inviter_id: UserId, invitee_email: Email, now: datetime
    ) -> bool:
        """Check for a live invitation from the inviter to the email."""
        for invitation in self._store.invitations.values():
            if (
                invitation.inviter_id == inviter_id
                and invitation.invitee_email == invitee_email
                and invitation.status == InvitationStatus.PENDING
                and invitation.expires_at > now
            ):
                return True
        return False

    async def find_by_inviter(
        self, inviter_id: UserId, limit: int = 50, offset: int = 0
    ) -> list[Invitation]:
        """Find invitations sent by a user with pagination."""
        matches = [
            invitation
            for invitation in self._store.invitations.values()
            if invitation.inviter_id == inviter_id
        ]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches[offset : offset + limit]

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update)."""
        self._store.invitations[invitation.id] = invitation
        return invitation

    async def transition_status(
        self,
        invitation_id: InvitationId,
        new_status: InvitationStatus,
        accepted_by_user_id: UserId | None = None,
        accepted_at: datetime | None = None,
    ) -> bool:
        """Move a PENDING invitation to ``new_status``."""
        invitation = self._store.invitations.get(invitation_id)
        if not invitation or invitation.status != InvitationStatus.PENDING:
            return False

        updates: dict = {"status": new_status}
        if new_status == InvitationStatus.ACCEPTED:
            updates["accepted_by_user_id"] = accepted_by_user_id
            updates["accepted_at"] = accepted_at

        self._store.invitations[invitation_id] = invitation.model_copy(update=updates)
        return True
