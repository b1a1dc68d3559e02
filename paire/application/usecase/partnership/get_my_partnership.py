"""Get current partnership use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from paire.application.usecase.base import BaseUseCase
from paire.application.usecase.partnership.schemas import (
    PartnershipResponse,
    build_partnership_response,
)
from paire.domain.service import PartnershipService, UserService
from paire.domain.value import UserId


class GetMyPartnershipRequest(BaseModel):
    """Request for the caller's partnership."""

    user_id: str


class GetMyPartnershipUseCase(BaseUseCase):
    """Get the caller's partnership with both members' profiles."""

    def __init__(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> None:
        self.partnership_service = partnership_service
        self.user_service = user_service

    async def execute(
        self, request: GetMyPartnershipRequest
    ) -> PartnershipResponse | None:
        """Returns None when the caller has no partner."""
        user_id = UserId(UUID(request.user_id))

        with logfire.span("get_my_partnership", user_id=str(user_id)):
            partnership = await self.partnership_service.get_for_user(user_id)
            if not partnership:
                return None
            return await build_partnership_response(partnership, self.user_service)
