"""Partnership state panel: the view model behind the partnership screen."""

from enum import Enum

import logfire

from paire.application.usecase.partnership import (
    InvitationItem,
    PartnershipResponse,
    ProfileSummary,
)
from paire.application.usecase.profile import ProfileResponse
from paire.client.api import PartnershipApi
from paire.client.error import ApiError, ClientError, InvitationValidationError
from paire.client.identity import IdentityContext
from paire.client.messages import MessageCategory, PanelMessage
from paire.domain.value import emails_match, is_valid_email


class PanelState(str, Enum):
    """Which view the panel shows. Exactly one applies after a load."""

    LOADING = "loading"
    LINKED = "linked"
    UNLINKED_WITH_INVITES = "unlinked_with_invites"
    UNLINKED_NO_INVITES = "unlinked_no_invites"


class PartnershipStatePanel:
    """Loads the caller's partnership state and runs the actions on it.

    Failures never raise out of the panel: they set ``message`` and leave a
    safe empty state, so the screen stays usable. After any successful
    mutation the panel re-reads from the API rather than patching itself.
    """

    def __init__(self, api: PartnershipApi, identity: IdentityContext) -> None:
        self.api = api
        self.identity = identity

        self.state = PanelState.LOADING
        self.profile: ProfileResponse | None = None
        self.partnership: PartnershipResponse | None = None
        self.partner: ProfileSummary | None = None
        self.pending_invitations: list[InvitationItem] = []
        self.message: PanelMessage | None = None
        self.loading = False
        self.saving = False

    @property
    def is_linked(self) -> bool:
        return self.state == PanelState.LINKED

    async def load(self) -> PanelState:
        """Fetch profile, partnership and (when unlinked) pending invitations."""
        self.loading = True
        self.message = None
        try:
            with logfire.span("partnership_panel.load", user_id=self.identity.user_id):
                await self._load()
        finally:
            self.loading = False
        return self.state

    async def _load(self) -> None:
        try:
            self.profile = await self.api.get_profile()
        except (ClientError, ValueError) as e:
            logfire.warn("Profile load failed", error=str(e))
            self.profile = None

        if self.profile is not None and not (self.profile.display_name or "").strip():
            self.message = PanelMessage.of(MessageCategory.DISPLAY_NAME_REQUIRED)

        try:
            self.partnership = await self.api.get_my_partnership()
        except (ClientError, ValueError) as e:
            logfire.warn("Partnership load failed", error=str(e))
            self._reset_to_unlinked()
            self.message = PanelMessage.of(MessageCategory.LOAD_ERROR)
            return

        if self.partnership is not None:
            self.partner = self._resolve_partner(self.partnership)
            self.pending_invitations = []
            self.state = PanelState.LINKED
            return

        self.partner = None
        try:
            invitations = await self.api.get_pending_invitations()
        except (ClientError, ValueError) as e:
            logfire.warn("Pending invitations load failed", error=str(e))
            invitations = []
            self.message = PanelMessage.of(MessageCategory.LOAD_ERROR)

        self.pending_invitations = [inv for inv in invitations if not inv.is_expired]
        self.state = (
            PanelState.UNLINKED_WITH_INVITES
            if self.pending_invitations
            else PanelState.UNLINKED_NO_INVITES
        )

    def _resolve_partner(self, partnership: PartnershipResponse) -> ProfileSummary | None:
        if partnership.user1_id == self.identity.user_id:
            return partnership.user2
        return partnership.user1

    def _reset_to_unlinked(self) -> None:
        self.partnership = None
        self.partner = None
        self.pending_invitations = []
        self.state = PanelState.UNLINKED_NO_INVITES

    def check_invitation(self, email: str) -> None:
        """Check the local preconditions for inviting ``email``.

        Raises:
            InvitationValidationError: With the first failing category
        """
        display_name = self.profile.display_name if self.profile else None
        if not (display_name or "").strip():
            raise InvitationValidationError(MessageCategory.DISPLAY_NAME_REQUIRED)
        if not is_valid_email(email):
            raise InvitationValidationError(MessageCategory.INVALID_EMAIL)
        own_email = self.profile.email if self.profile else self.identity.email
        if emails_match(email, own_email):
            raise InvitationValidationError(MessageCategory.SELF_INVITE)

    async def send_invitation(self, email: str) -> bool:
        """Invite ``email``. Local precondition failures make no request."""
        self.message = None
        email = email.strip()
        try:
            self.check_invitation(email)
        except InvitationValidationError as e:
            self.message = PanelMessage.of(e.category)
            return False

        self.saving = True
        try:
            with logfire.span("partnership_panel.send_invitation"):
                await self.api.send_invitation(email)
        except ApiError as e:
            self.message = PanelMessage.of(MessageCategory.SEND_FAILED, e.detail)
            return False
        finally:
            self.saving = False

        self.message = PanelMessage.of(MessageCategory.INVITE_SENT)
        return True

    async def accept(self, token: str) -> bool:
        """Accept a pending invitation, then reload."""
        self.message = None
        self.saving = True
        try:
            with logfire.span("partnership_panel.accept"):
                await self.api.accept_invitation(token)
        except (ClientError, ValueError) as e:
            self.message = PanelMessage.of(
                MessageCategory.ACCEPT_FAILED,
                e.detail if isinstance(e, ApiError) else None,
            )
            return False
        finally:
            self.saving = False

        await self._reload_after(MessageCategory.INVITATION_ACCEPTED)
        return True

    async def disconnect(self) -> bool:
        """End the current partnership, then reload."""
        self.message = None
        if self.partnership is None:
            self.message = PanelMessage.of(MessageCategory.DISCONNECT_FAILED)
            return False

        self.saving = True
        try:
            with logfire.span(
                "partnership_panel.disconnect", partnership_id=self.partnership.id
            ):
                await self.api.end_partnership(self.partnership.id)
        except ClientError as e:
            self.message = PanelMessage.of(
                MessageCategory.DISCONNECT_FAILED,
                e.detail if isinstance(e, ApiError) else None,
            )
            return False
        finally:
            self.saving = False

        await self._reload_after(MessageCategory.DISCONNECTED)
        return True

    async def _reload_after(self, success: MessageCategory) -> None:
        """Re-read after a mutation. A failed re-read keeps its LOAD_ERROR."""
        await self.load()
        if self.message is None or self.message.category != MessageCategory.LOAD_ERROR:
            self.message = PanelMessage.of(success)
