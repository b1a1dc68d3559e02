"""Revoke invitation use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from paire.application.usecase.base import BaseUseCase
from paire.domain.service import InvitationService
from paire.domain.value import InvitationId, UserId


class RevokeInvitationRequest(BaseModel):
    """Request to revoke a pending invitation."""

    inviter_id: str
    invitation_id: str


class RevokeInvitationUseCase(BaseUseCase):
    """Use case for withdrawing an invitation before it is accepted."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: RevokeInvitationRequest) -> None:
        """Execute revoke invitation use case.

        Raises:
            NotFoundError: If the invitation does not exist
            NotAuthorizedError: If the caller did not send it
            InvitationNotActionableError: If it is no longer pending
        """
        inviter_id = UserId(UUID(request.inviter_id))
        invitation_id = InvitationId(UUID(request.invitation_id))

        with logfire.span(
            "revoke_invitation",
            inviter_id=str(inviter_id),
            invitation_id=str(invitation_id),
        ):
            await self.invitation_service.revoke(invitation_id, inviter_id)
