"""Invitation domain service."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from paire.domain.error import (
    DuplicateInvitationError,
    InvitationNotActionableError,
    NotAuthorizedError,
    NotFoundError,
)
from paire.domain.model import Invitation
from paire.domain.model.common import utcnow
from paire.domain.repository import InvitationRepository
from paire.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)

from .base import Service


class InvitationService(Service):
    """Domain service for partnership invitation operations."""

    def __init__(self, invitation_repository: InvitationRepository) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
        """
        self.invitation_repository = invitation_repository

    async def create_invitation(
        self,
        inviter_id: UserId,
        invitee_email: Email,
        token: InvitationToken,
        expiry_days: int,
        now: datetime | None = None,
    ) -> Invitation:
        """Create a pending invitation.

        Args:
            inviter_id: User sending the invitation
            invitee_email: Target email
            token: Unique invitation token
            expiry_days: Days until the invitation expires
            now: Creation time (defaults to current UTC time)

        Returns:
            Created invitation

        Raises:
            DuplicateInvitationError: If a live invitation to the same email exists
        """
        now = now or utcnow()
        with logfire.span(
            "invitation_service.create_invitation", inviter_id=str(inviter_id)
        ):
            if await self.invitation_repository.exists_pending_for_pair(
                inviter_id, invitee_email, now
            ):
                logfire.warn(
                    "Pending invitation already exists", inviter_id=str(inviter_id)
                )
                raise DuplicateInvitationError(
                    "A pending invitation to this email already exists"
                )

            invitation = Invitation(
                id=InvitationId(uuid4()),
                token=token,
                inviter_id=inviter_id,
                invitee_email=invitee_email,
                status=InvitationStatus.PENDING,
                created_at=now,
                expires_at=now + timedelta(days=expiry_days),
            )

            saved = await self.invitation_repository.save(invitation)
            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                inviter_id=str(inviter_id),
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def get_by_token(self, token: InvitationToken) -> Invitation | None:
        """Get an invitation by token, whatever its status.

        Args:
            token: Invitation token

        Returns:
            Invitation if found, None otherwise
        """
        with logfire.span(
            "invitation_service.get_by_token", token=token.redacted()
        ):
            invitation = await self.invitation_repository.find_by_token(token)
            if invitation:
                logfire.info(
                    "Invitation found",
                    invitation_id=str(invitation.id),
                    status=invitation.status.value,
                )
            else:
                logfire.warn("Invitation not found", token=token.redacted())
            return invitation

    async def list_pending_for_invitee(
        self, email: Email, now: datetime | None = None
    ) -> list[Invitation]:
        """List live invitations addressed to an email, newest first.

        Args:
            email: Invitee email
            now: Reference time for expiry

        Returns:
            Pending, unexpired invitations
        """
        now = now or utcnow()
        with logfire.span("invitation_service.list_pending_for_invitee"):
            invitations = await self.invitation_repository.find_pending_for_invitee(
                email, now
            )
            # Storage already filters, but expiry is re-checked against the same clock
            invitations = [inv for inv in invitations if inv.is_actionable(now)]
            logfire.info("Pending invitations listed", count=len(invitations))
            return invitations

    async def list_sent(
        self, inviter_id: UserId, limit: int = 50, offset: int = 0
    ) -> list[Invitation]:
        """List invitations sent by a user.

        Args:
            inviter_id: Inviter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            Invitations, newest first
        """
        with logfire.span(
            "invitation_service.list_sent",
            inviter_id=str(inviter_id),
            limit=limit,
            offset=offset,
        ):
            return await self.invitation_repository.find_by_inviter(
                inviter_id, limit, offset
            )

    async def consume(
        self, invitation: Invitation, user_id: UserId, now: datetime | None = None
    ) -> Invitation:
        """Mark a pending invitation as accepted by ``user_id``.

        Args:
            invitation: Invitation being accepted
            user_id: Accepting user
            now: Acceptance time

        Returns:
            The accepted invitation

        Raises:
            InvitationNotActionableError: If another caller consumed it first
        """
        now = now or utcnow()
        with logfire.span(
            "invitation_service.consume",
            invitation_id=str(invitation.id),
            user_id=str(user_id),
        ):
            transitioned = await self.invitation_repository.transition_status(
                invitation.id,
                InvitationStatus.ACCEPTED,
                accepted_by_user_id=user_id,
                accepted_at=now,
            )
            if not transitioned:
                logfire.warn(
                    "Invitation consumed concurrently",
                    invitation_id=str(invitation.id),
                )
                raise InvitationNotActionableError()

            logfire.info("Invitation accepted", invitation_id=str(invitation.id))
            return invitation.model_copy(
                update={
                    "status": InvitationStatus.ACCEPTED,
                    "accepted_at": now,
                    "accepted_by_user_id": user_id,
                }
            )

    async def mark_expired(self, invitation: Invitation) -> None:
        """Persist EXPIRED for a pending invitation found past its expiry."""
        with logfire.span(
            "invitation_service.mark_expired", invitation_id=str(invitation.id)
        ):
            await self.invitation_repository.transition_status(
                invitation.id, InvitationStatus.EXPIRED
            )
            logfire.info("Invitation marked expired", invitation_id=str(invitation.id))

    async def revoke(self, invitation_id: InvitationId, inviter_id: UserId) -> None:
        """Revoke a pending invitation. Only its sender may revoke it.

        Args:
            invitation_id: Invitation to revoke
            inviter_id: Requesting user

        Raises:
            NotFoundError: If the invitation does not exist
            NotAuthorizedError: If the requester did not send it
            InvitationNotActionableError: If it is no longer pending
        """
        with logfire.span(
            "invitation_service.revoke",
            invitation_id=str(invitation_id),
            inviter_id=str(inviter_id),
        ):
            invitation = await self.invitation_repository.find_by_id(invitation_id)
            if not invitation:
                raise NotFoundError("Invitation", str(invitation_id))
            if invitation.inviter_id != inviter_id:
                raise NotAuthorizedError(
                    "invitation", str(invitation_id), str(inviter_id)
                )

            transitioned = await self.invitation_repository.transition_status(
                invitation_id, InvitationStatus.REVOKED
            )
            if not transitioned:
                raise InvitationNotActionableError("Invitation is no longer pending")

            logfire.info("Invitation revoked", invitation_id=str(invitation_id))
