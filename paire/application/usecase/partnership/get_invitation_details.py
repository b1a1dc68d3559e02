"""Get invitation details use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from paire.application.usecase.base import BaseUseCase
from paire.application.usecase.partnership.schemas import (
    InvitationItem,
    build_invitation_item,
)
from paire.domain.error import NotFoundError
from paire.domain.service import InvitationService, UserService
from paire.domain.value import InvitationToken


class GetInvitationDetailsRequest(BaseModel):
    """Request for an invitation preview."""

    token: str


class GetInvitationDetailsUseCase(BaseUseCase):
    """Preview an invitation by token. Never consumes it.

    Returns the invitation whatever its status so the caller can decide
    what to do with expired or already-used links.
    """

    def __init__(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> None:
        self.invitation_service = invitation_service
        self.user_service = user_service

    async def execute(self, request: GetInvitationDetailsRequest) -> InvitationItem:
        """Execute get invitation details use case.

        Raises:
            NotFoundError: If no invitation has this token
        """
        try:
            token = InvitationToken(root=request.token)
        except PydanticValidationError:
            raise NotFoundError("Invitation", "<invalid token>")

        with logfire.span("get_invitation_details", token=token.redacted()):
            invitation = await self.invitation_service.get_by_token(token)
            if not invitation:
                raise NotFoundError("Invitation", token.redacted())

            return await build_invitation_item(invitation, self.user_service)
