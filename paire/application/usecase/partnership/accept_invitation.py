"""Accept partnership invitation use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from paire.application.usecase.base import BaseUseCase
from paire.application.usecase.partnership.schemas import (
    PartnershipResponse,
    build_partnership_response,
)
from paire.domain.error import (
    InvitationEmailMismatchError,
    InvitationExpiredError,
    InvitationNotActionableError,
)
from paire.domain.model.common import utcnow
from paire.domain.repository import TransactionManager
from paire.domain.service import InvitationService, PartnershipService, UserService
from paire.domain.value import InvitationStatus, InvitationToken, UserId, emails_match


class AcceptInvitationRequest(BaseModel):
    """Request to accept an invitation."""

    user_id: str
    token: str


class AcceptInvitationResponse(BaseModel):
    """Response after an invitation is accepted."""

    message: str
    partnership: PartnershipResponse


class AcceptInvitationUseCase(BaseUseCase):
    """Use case for consuming an invitation token and linking the two users.

    A token is consumed at most once: the pending -> accepted transition is
    conditional in storage, so of two concurrent accepts only one links.
    Consumption and linking share one atomic block, so an accept that
    fails to link leaves the invitation pending.
    """

    def __init__(
        self,
        user_service: UserService,
        invitation_service: InvitationService,
        partnership_service: PartnershipService,
        transactions: TransactionManager,
    ) -> None:
        """Initialize use case.

        Args:
            user_service: User domain service
            invitation_service: Invitation domain service
            partnership_service: Partnership domain service
            transactions: Groups consume and link into one write
        """
        self.user_service = user_service
        self.invitation_service = invitation_service
        self.partnership_service = partnership_service
        self.transactions = transactions

    async def execute(self, request: AcceptInvitationRequest) -> AcceptInvitationResponse:
        """Execute accept invitation use case.

        Args:
            request: Accept invitation request

        Returns:
            The new (or existing) partnership

        Raises:
            InvitationNotActionableError: If the token is unknown or not pending
            InvitationEmailMismatchError: If the caller is not the invitee
            InvitationExpiredError: If the invitation has expired
            PartnershipConflictError: If either user has another partner
            NotFoundError: If the caller does not exist
        """
        user_id = UserId(UUID(request.user_id))

        try:
            token = InvitationToken(root=request.token)
        except PydanticValidationError:
            raise InvitationNotActionableError()

        with logfire.span(
            "accept_invitation", user_id=str(user_id), token=token.redacted()
        ):
            user = await self.user_service.get_by_id(user_id)

            invitation = await self.invitation_service.get_by_token(token)
            if not invitation or invitation.status != InvitationStatus.PENDING:
                raise InvitationNotActionableError()

            if not emails_match(user.email.root, invitation.invitee_email.root):
                logfire.warn(
                    "Invitation email mismatch",
                    invitation_id=str(invitation.id),
                    user_id=str(user_id),
                )
                raise InvitationEmailMismatchError()

            now = utcnow()
            if invitation.is_expired_at(now):
                await self.invitation_service.mark_expired(invitation)
                raise InvitationExpiredError()

            existing = await self.partnership_service.get_for_user(user_id)
            if existing and existing.involves(invitation.inviter_id):
                await self.invitation_service.consume(invitation, user_id, now)
                logfire.info(
                    "Invitation accepted for existing partnership",
                    partnership_id=str(existing.id),
                )
                return AcceptInvitationResponse(
                    message="You are already partners with this user",
                    partnership=await build_partnership_response(
                        existing, self.user_service
                    ),
                )

            # Conflicts are checked before consuming so a rejected accept
            # leaves the invitation pending.
            await self.partnership_service.ensure_unlinked(
                user_id, "You already have a partner"
            )
            await self.partnership_service.ensure_unlinked(
                invitation.inviter_id, "The inviter already has a partner"
            )

            async with self.transactions.atomic():
                await self.invitation_service.consume(invitation, user_id, now)
                partnership = await self.partnership_service.link(
                    inviter_id=invitation.inviter_id, invitee_id=user_id, now=now
                )

            return AcceptInvitationResponse(
                message="Partnership created",
                partnership=await build_partnership_response(
                    partnership, self.user_service
                ),
            )
