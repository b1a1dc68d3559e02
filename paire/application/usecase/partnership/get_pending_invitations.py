"""Get pending invitations use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from paire.application.usecase.base import BaseUseCase
from paire.application.usecase.partnership.schemas import (
    InvitationItem,
    build_invitation_item,
)
from paire.domain.model.common import utcnow
from paire.domain.service import InvitationService, UserService
from paire.domain.value import UserId


class GetPendingInvitationsRequest(BaseModel):
    """Request for the caller's incoming invitations."""

    user_id: str


class GetPendingInvitationsResponse(BaseModel):
    """Live invitations addressed to the caller, newest first."""

    invitations: list[InvitationItem]


class GetPendingInvitationsUseCase(BaseUseCase):
    """List invitations addressed to the caller's email that can still be accepted."""

    def __init__(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> None:
        self.invitation_service = invitation_service
        self.user_service = user_service

    async def execute(
        self, request: GetPendingInvitationsRequest
    ) -> GetPendingInvitationsResponse:
        """Execute get pending invitations use case.

        Raises:
            NotFoundError: If the caller does not exist
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span("get_pending_invitations", user_id=str(user_id)):
            user = await self.user_service.get_by_id(user_id)
            now = utcnow()
            invitations = await self.invitation_service.list_pending_for_invitee(
                user.email, now
            )
            items = [
                await build_invitation_item(invitation, self.user_service, now)
                for invitation in invitations
            ]
            return GetPendingInvitationsResponse(invitations=items)
