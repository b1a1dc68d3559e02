"""List sent invitations use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from paire.application.usecase.base import BaseUseCase
from paire.domain.model.common import utcnow
from paire.domain.service import InvitationService
from paire.domain.value import InvitationStatus, UserId


class ListSentInvitationsRequest(BaseModel):
    """Request for invitations sent by the caller."""

    inviter_id: str
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class SentInvitationItem(BaseModel):
    """Invitation as seen by its sender. The token is not echoed back."""

    id: str
    invitee_email: str
    status: InvitationStatus
    created_at: datetime
    expires_at: datetime
    accepted_at: datetime | None
    is_expired: bool


class ListSentInvitationsResponse(BaseModel):
    """Sent invitations, newest first."""

    invitations: list[SentInvitationItem]
    total: int


class ListSentInvitationsUseCase(BaseUseCase):
    """Use case for listing invitations the caller has sent."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: ListSentInvitationsRequest
    ) -> ListSentInvitationsResponse:
        inviter_id = UserId(UUID(request.inviter_id))

        with logfire.span("list_sent_invitations", inviter_id=str(inviter_id)):
            invitations = await self.invitation_service.list_sent(
                inviter_id, request.limit, request.offset
            )
            now = utcnow()
            items = [
                SentInvitationItem(
                    id=str(invitation.id),
                    invitee_email=invitation.invitee_email.root,
                    status=invitation.status,
                    created_at=invitation.created_at,
                    expires_at=invitation.expires_at,
                    accepted_at=invitation.accepted_at,
                    is_expired=invitation.is_expired_at(now),
                )
                for invitation in invitations
            ]
            return ListSentInvitationsResponse(invitations=items, total=len(items))
