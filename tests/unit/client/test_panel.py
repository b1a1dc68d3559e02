"""Tests for the partnership state panel."""

import pytest

from paire.client import (
    ApiError,
    IdentityContext,
    MessageCategory,
    PanelState,
    PartnershipStatePanel,
)
from tests.unit.client.fakes import (
    FakePartnershipApi,
    invitation_item,
    partnership,
    profile,
)

ME = IdentityContext(user_id="me-id", email="me@example.com")


@pytest.fixture
def api():
    fake = FakePartnershipApi()
    fake.profile = profile("me-id", "me@example.com", "Me")
    return fake


@pytest.fixture
def panel(api):
    return PartnershipStatePanel(api, ME)


class TestLoad:
    """Tests for PartnershipStatePanel.load."""

    def test_starts_loading(self, panel):
        assert panel.state == PanelState.LOADING

    @pytest.mark.asyncio
    @pytest.mark.parametrize("me_as_user1", [True, False])
    async def test_linked_resolves_partner(self, panel, api, me_as_user1):
        api.partnership = (
            partnership("me-id", "partner-id")
            if me_as_user1
            else partnership("partner-id", "me-id")
        )

        state = await panel.load()

        assert state == PanelState.LINKED
        assert panel.partner.id == "partner-id"
        assert api.count("get_pending_invitations") == 0

    @pytest.mark.asyncio
    async def test_unlinked_with_invites_drops_expired(self, panel, api):
        live = invitation_item("live")
        api.pending = [live, invitation_item("old", is_expired=True)]

        state = await panel.load()

        assert state == PanelState.UNLINKED_WITH_INVITES
        assert panel.pending_invitations == [live]

    @pytest.mark.asyncio
    async def test_unlinked_no_invites(self, panel, api):
        api.pending = [invitation_item("old", is_expired=True)]

        assert await panel.load() == PanelState.UNLINKED_NO_INVITES

    @pytest.mark.asyncio
    async def test_missing_display_name_warns_but_loads(self, panel, api):
        api.profile = profile("me-id", "me@example.com", display_name=None)

        state = await panel.load()

        assert state == PanelState.UNLINKED_NO_INVITES
        assert panel.message.category == MessageCategory.DISPLAY_NAME_REQUIRED

    @pytest.mark.asyncio
    async def test_load_failure_leaves_safe_default(self, panel, api):
        api.partnership = ApiError(500, "boom")

        state = await panel.load()

        assert state == PanelState.UNLINKED_NO_INVITES
        assert panel.partnership is None
        assert panel.pending_invitations == []
        assert panel.message.category == MessageCategory.LOAD_ERROR
        assert panel.loading is False


class TestSendInvitation:
    """Tests for PartnershipStatePanel.send_invitation."""

    @pytest.mark.asyncio
    async def test_self_invite_rejected_without_request(self, panel, api):
        await panel.load()

        sent = await panel.send_invitation("ME@Example.com")

        assert sent is False
        assert panel.message.category == MessageCategory.SELF_INVITE
        assert api.count("send_invitation") == 0

    @pytest.mark.asyncio
    async def test_invalid_email_rejected_without_request(self, panel, api):
        await panel.load()

        assert await panel.send_invitation("not-an-email") is False
        assert panel.message.category == MessageCategory.INVALID_EMAIL
        assert api.count("send_invitation") == 0

    @pytest.mark.asyncio
    async def test_display_name_checked_first(self, panel, api):
        api.profile = profile("me-id", "me@example.com", display_name="")
        await panel.load()

        assert await panel.send_invitation("me@example.com") is False
        assert panel.message.category == MessageCategory.DISPLAY_NAME_REQUIRED
        assert api.count("send_invitation") == 0

    @pytest.mark.asyncio
    async def test_sends_valid_invitation(self, panel, api):
        await panel.load()

        assert await panel.send_invitation("  partner@example.com ") is True
        assert api.calls[-1] == ("send_invitation", ("partner@example.com",))
        assert panel.message.category == MessageCategory.INVITE_SENT
        assert panel.saving is False

    @pytest.mark.asyncio
    async def test_server_rejection(self, panel, api):
        await panel.load()
        api.send_error = ApiError(409, "You already have a partner")

        assert await panel.send_invitation("partner@example.com") is False
        assert panel.message.category == MessageCategory.SEND_FAILED
        assert panel.message.text == "You already have a partner"


class TestAcceptAndDisconnect:
    """Tests for accept and disconnect."""

    @pytest.mark.asyncio
    async def test_accept_reloads_into_linked(self, panel, api):
        api.pending = [invitation_item("tok")]
        await panel.load()
        api.accept_result = partnership("alice-id", "me-id")

        assert await panel.accept("tok") is True

        assert panel.state == PanelState.LINKED
        assert panel.partner.display_name == "Alice"
        assert panel.message.category == MessageCategory.INVITATION_ACCEPTED

    @pytest.mark.asyncio
    async def test_accept_failure_keeps_invites(self, panel, api):
        api.pending = [invitation_item("tok")]
        await panel.load()
        api.accept_result = ApiError(404, "Invitation not found or already used")

        assert await panel.accept("tok") is False
        assert panel.state == PanelState.UNLINKED_WITH_INVITES
        assert panel.message.category == MessageCategory.ACCEPT_FAILED

    @pytest.mark.asyncio
    async def test_disconnect_refetches(self, panel, api):
        """After disconnect the panel re-reads: no partnership, invites reachable."""
        api.partnership = partnership("me-id", "partner-id")
        await panel.load()
        api.pending = [invitation_item("new")]
        reads_before = api.count("get_my_partnership")

        assert await panel.disconnect() is True

        assert api.count("get_my_partnership") == reads_before + 1
        assert panel.partnership is None
        assert panel.state == PanelState.UNLINKED_WITH_INVITES
        assert panel.message.category == MessageCategory.DISCONNECTED

    @pytest.mark.asyncio
    async def test_disconnect_failure(self, panel, api):
        api.partnership = partnership("me-id", "partner-id")
        await panel.load()
        api.end_error = ApiError(500, "boom")

        assert await panel.disconnect() is False
        assert panel.state == PanelState.LINKED
        assert panel.message.category == MessageCategory.DISCONNECT_FAILED


class TestReloadFailureAfterMutation:
    """A failed re-read after a successful mutation is still reported."""

    @pytest.mark.asyncio
    async def test_accept_then_reload_fails(self, panel, api):
        # Arrange
        api.pending = [invitation_item("tok")]
        await panel.load()
        api.accept_result = partnership("alice-id", "me-id")
        api.partnership_error = ApiError(500, "boom")

        # Act
        accepted = await panel.accept("tok")

        # Assert
        assert accepted is True
        assert panel.state == PanelState.UNLINKED_NO_INVITES
        assert panel.message.category == MessageCategory.LOAD_ERROR

    @pytest.mark.asyncio
    async def test_disconnect_then_reload_fails(self, panel, api):
        api.partnership = partnership("me-id", "partner-id")
        await panel.load()
        api.partnership_error = ApiError(500, "boom")

        assert await panel.disconnect() is True

        assert api.count("end_partnership") == 1
        assert panel.message.category == MessageCategory.LOAD_ERROR

    @pytest.mark.asyncio
    async def test_display_name_warning_does_not_hide_success(self, panel, api):
        api.profile = profile("me-id", "me@example.com", display_name=None)
        api.pending = [invitation_item("tok")]
        await panel.load()
        api.accept_result = partnership("alice-id", "me-id")

        assert await panel.accept("tok") is True

        assert panel.state == PanelState.LINKED
        assert panel.message.category == MessageCategory.INVITATION_ACCEPTED
