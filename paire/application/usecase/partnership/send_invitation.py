"""Send partnership invitation use case."""

import secrets
from datetime import datetime
from urllib.parse import urlencode
from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from paire.adapter.error import ProviderError
from paire.application.usecase.base import BaseUseCase
from paire.config import Settings
from paire.domain.error import (
    DisplayNameRequiredError,
    InvalidEmailError,
    InviteeUnavailableError,
    SelfInvitationError,
)
from paire.domain.service import (
    InvitationService,
    NotificationService,
    PartnershipService,
    UserService,
)
from paire.domain.value import Email, InvitationToken, UserId, emails_match

INVITE_SENT_MESSAGE = "If this email is registered, an invitation will be sent."


class SendInvitationRequest(BaseModel):
    """Request to invite a partner by email."""

    inviter_id: str
    email: str


class SendInvitationResponse(BaseModel):
    """Response after an invitation is created."""

    message: str = INVITE_SENT_MESSAGE
    invitation_id: str
    expires_at: datetime
    email_delivered: bool


class SendInvitationUseCase(BaseUseCase):
    """Use case for inviting someone to form a partnership.

    Caller-side failures (bad email, self-invite, missing display name,
    caller already linked) raise. Target-side failures (target linked,
    duplicate pending invitation) also raise, with distinct types, so the
    HTTP layer can keep them indistinguishable from success.
    """

    def __init__(
        self,
        user_service: UserService,
        invitation_service: InvitationService,
        partnership_service: PartnershipService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            user_service: User domain service
            invitation_service: Invitation domain service
            partnership_service: Partnership domain service
            notification_service: Notification domain service
            settings: Application settings
        """
        self.user_service = user_service
        self.invitation_service = invitation_service
        self.partnership_service = partnership_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(self, request: SendInvitationRequest) -> SendInvitationResponse:
        """Execute send invitation use case.

        Args:
            request: Send invitation request

        Returns:
            Created invitation summary

        Raises:
            InvalidEmailError: If the email is malformed
            DisplayNameRequiredError: If the inviter has no display name
            SelfInvitationError: If the inviter invites their own email
            PartnershipConflictError: If the inviter already has a partner
            InviteeUnavailableError: If the invitee already has a partner
            DuplicateInvitationError: If a live invitation already exists
            NotFoundError: If the inviter does not exist
        """
        inviter_id = UserId(UUID(request.inviter_id))

        with logfire.span("send_invitation", inviter_id=str(inviter_id)):
            try:
                invitee_email = Email(root=request.email)
            except PydanticValidationError:
                raise InvalidEmailError(request.email)

            inviter = await self.user_service.get_by_id(inviter_id)
            if not inviter.has_display_name:
                raise DisplayNameRequiredError()

            if emails_match(inviter.email.root, invitee_email.root):
                raise SelfInvitationError()

            await self.partnership_service.ensure_unlinked(
                inviter_id, "You already have a partner"
            )

            invitee = await self.user_service.find_by_email(invitee_email)
            if invitee and await self.partnership_service.get_for_user(invitee.id):
                logfire.warn(
                    "Invitee already has a partner", inviter_id=str(inviter_id)
                )
                raise InviteeUnavailableError("This user already has a partner")

            token = InvitationToken(
                root=secrets.token_urlsafe(self.settings.invitations.token_bytes)
            )
            invitation = await self.invitation_service.create_invitation(
                inviter_id=inviter_id,
                invitee_email=invitee_email,
                token=token,
                expiry_days=self.settings.invitations.expiry_days,
            )

            accept_url = (
                f"{self.settings.api.frontend_url}/accept-invitation?"
                f"{urlencode({'token': token.root})}"
            )

            # The invitation stays valid without the email: the invitee still
            # sees it in their pending list after signing in.
            email_delivered = True
            try:
                await self.notification_service.send_invitation_email(
                    inviter=inviter,
                    invitation=invitation,
                    accept_url=accept_url,
                    expiry_days=self.settings.invitations.expiry_days,
                )
            except ProviderError as e:
                email_delivered = False
                logfire.error(
                    "Failed to deliver invitation email",
                    invitation_id=str(invitation.id),
                    error=str(e),
                )

            return SendInvitationResponse(
                invitation_id=str(invitation.id),
                expires_at=invitation.expires_at,
                email_delivered=email_delivered,
            )
