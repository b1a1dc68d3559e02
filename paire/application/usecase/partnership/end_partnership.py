"""End partnership use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from paire.application.usecase.base import BaseUseCase
from paire.domain.service import PartnershipService
from paire.domain.value import PartnershipId, UserId


class EndPartnershipRequest(BaseModel):
    """Request to end a partnership."""

    user_id: str
    partnership_id: str


class EndPartnershipUseCase(BaseUseCase):
    """Use case for disconnecting partners. Either member may end it."""

    def __init__(self, partnership_service: PartnershipService) -> None:
        self.partnership_service = partnership_service

    async def execute(self, request: EndPartnershipRequest) -> None:
        """Execute end partnership use case.

        Raises:
            NotFoundError: If the partnership does not exist or the caller
                is not a member
        """
        user_id = UserId(UUID(request.user_id))
        partnership_id = PartnershipId(UUID(request.partnership_id))

        with logfire.span(
            "end_partnership",
            user_id=str(user_id),
            partnership_id=str(partnership_id),
        ):
            await self.partnership_service.end(partnership_id, user_id)
