"""Tests for accept invitation use case."""

import asyncio
from datetime import timedelta
from uuid import uuid4

import pytest

from paire.application.usecase.partnership import (
    AcceptInvitationRequest,
    AcceptInvitationUseCase,
)
from paire.domain.error import (
    InvitationEmailMismatchError,
    InvitationExpiredError,
    InvitationNotActionableError,
    PartnershipConflictError,
)
from paire.domain.model import Partnership
from paire.domain.model.common import utcnow
from paire.domain.repository import InvitationRepository, PartnershipRepository
from paire.domain.service import PartnershipService, UserService
from paire.domain.value import InvitationStatus, PartnershipId
from tests.factories import make_invitation, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup(unit_env, invitee_email="bob@example.com", **invitation_kwargs):
    user_service = await unit_env.get(UserService)
    invitations = await unit_env.get(InvitationRepository)
    alice = await user_service.save(make_user("alice@example.com", "Alice"))
    bob = await user_service.save(make_user(invitee_email, "Bob"))
    invitation = await invitations.save(
        make_invitation(alice.id, invitee_email="bob@example.com", **invitation_kwargs)
    )
    return alice, bob, invitation


class TestAcceptInvitationUseCase:
    """Tests for AcceptInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_accept_creates_partnership(self, unit_env):
        """Inviter becomes user1, invitee user2, invitation is consumed."""
        # Arrange
        use_case = await unit_env.get(AcceptInvitationUseCase)
        invitations = await unit_env.get(InvitationRepository)
        alice, bob, invitation = await _setup(unit_env)

        # Act
        response = await use_case.execute(
            AcceptInvitationRequest(user_id=str(bob.id), token=invitation.token.root)
        )

        # Assert
        partnership = response.partnership
        assert partnership.user1_id == str(alice.id)
        assert partnership.user2_id == str(bob.id)
        assert partnership.user1.display_name == "Alice"
        assert partnership.user2.email == "bob@example.com"

        stored = await invitations.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.ACCEPTED
        assert stored.accepted_by_user_id == bob.id
        assert stored.accepted_at is not None

    @pytest.mark.asyncio
    async def test_email_match_is_case_insensitive(self, unit_env):
        use_case = await unit_env.get(AcceptInvitationUseCase)
        user_service = await unit_env.get(UserService)
        invitations = await unit_env.get(InvitationRepository)
        alice = await user_service.save(make_user("alice@example.com"))
        bob = await user_service.save(make_user("BOB@Example.com"))
        invitation = await invitations.save(
            make_invitation(alice.id, invitee_email="bob@EXAMPLE.com")
        )

        response = await use_case.execute(
            AcceptInvitationRequest(user_id=str(bob.id), token=invitation.token.root)
        )

        assert response.partnership.user2_id == str(bob.id)

    @pytest.mark.asyncio
    async def test_second_accept_fails_and_creates_nothing(self, unit_env):
        """Single acceptance per token."""
        use_case = await unit_env.get(AcceptInvitationUseCase)
        partnership_service = await unit_env.get(PartnershipService)
        alice, bob, invitation = await _setup(unit_env)
        request = AcceptInvitationRequest(
            user_id=str(bob.id), token=invitation.token.root
        )
        first = await use_case.execute(request)

        with pytest.raises(InvitationNotActionableError):
            await use_case.execute(request)

        partnership = await partnership_service.get_for_user(bob.id)
        assert str(partnership.id) == first.partnership.id

    @pytest.mark.asyncio
    async def test_concurrent_accepts_link_once(self, unit_env):
        use_case = await unit_env.get(AcceptInvitationUseCase)
        alice, bob, invitation = await _setup(unit_env)
        request = AcceptInvitationRequest(
            user_id=str(bob.id), token=invitation.token.root
        )

        results = await asyncio.gather(
            use_case.execute(request),
            use_case.execute(request),
            return_exceptions=True,
        )

        successes = [r for r in results if not isinstance(r, Exception)]
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(successes) == 1
        assert len(failures) == 1
        assert isinstance(
            failures[0], (InvitationNotActionableError, PartnershipConflictError)
        )

    @pytest.mark.asyncio
    async def test_unknown_token(self, unit_env):
        use_case = await unit_env.get(AcceptInvitationUseCase)
        _, bob, _ = await _setup(unit_env)

        with pytest.raises(InvitationNotActionableError):
            await use_case.execute(
                AcceptInvitationRequest(user_id=str(bob.id), token="no-such-token")
            )

    @pytest.mark.asyncio
    async def test_wrong_email_forbidden(self, unit_env):
        use_case = await unit_env.get(AcceptInvitationUseCase)
        user_service = await unit_env.get(UserService)
        invitations = await unit_env.get(InvitationRepository)
        _, _, invitation = await _setup(unit_env)
        mallory = await user_service.save(make_user("mallory@example.com"))

        with pytest.raises(InvitationEmailMismatchError):
            await use_case.execute(
                AcceptInvitationRequest(
                    user_id=str(mallory.id), token=invitation.token.root
                )
            )

        stored = await invitations.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_expired_invitation_marked_expired(self, unit_env):
        """An expired-but-pending invitation is never accepted."""
        use_case = await unit_env.get(AcceptInvitationUseCase)
        invitations = await unit_env.get(InvitationRepository)
        partnership_service = await unit_env.get(PartnershipService)
        _, bob, invitation = await _setup(unit_env, expires_in=timedelta(seconds=-1))

        with pytest.raises(InvitationExpiredError):
            await use_case.execute(
                AcceptInvitationRequest(
                    user_id=str(bob.id), token=invitation.token.root
                )
            )

        stored = await invitations.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.EXPIRED
        assert await partnership_service.get_for_user(bob.id) is None

    @pytest.mark.asyncio
    async def test_invitee_with_other_partner_conflicts(self, unit_env):
        use_case = await unit_env.get(AcceptInvitationUseCase)
        user_service = await unit_env.get(UserService)
        partnership_service = await unit_env.get(PartnershipService)
        invitations = await unit_env.get(InvitationRepository)
        _, bob, invitation = await _setup(unit_env)
        carol = await user_service.save(make_user("carol@example.com"))
        await partnership_service.link(carol.id, bob.id)

        with pytest.raises(PartnershipConflictError):
            await use_case.execute(
                AcceptInvitationRequest(
                    user_id=str(bob.id), token=invitation.token.root
                )
            )

        # Rejected accepts leave the invitation usable later
        stored = await invitations.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_inviter_with_other_partner_conflicts(self, unit_env):
        use_case = await unit_env.get(AcceptInvitationUseCase)
        user_service = await unit_env.get(UserService)
        partnership_service = await unit_env.get(PartnershipService)
        alice, bob, invitation = await _setup(unit_env)
        carol = await user_service.save(make_user("carol@example.com"))
        await partnership_service.link(alice.id, carol.id)

        with pytest.raises(PartnershipConflictError):
            await use_case.execute(
                AcceptInvitationRequest(
                    user_id=str(bob.id), token=invitation.token.root
                )
            )

    @pytest.mark.asyncio
    async def test_already_partnered_with_inviter(self, unit_env):
        """Returns the existing partnership and consumes the invitation."""
        use_case = await unit_env.get(AcceptInvitationUseCase)
        partnership_service = await unit_env.get(PartnershipService)
        invitations = await unit_env.get(InvitationRepository)
        alice, bob, invitation = await _setup(unit_env)
        existing = await partnership_service.link(alice.id, bob.id)

        response = await use_case.execute(
            AcceptInvitationRequest(user_id=str(bob.id), token=invitation.token.root)
        )

        assert response.partnership.id == str(existing.id)
        assert response.message == "You are already partners with this user"
        stored = await invitations.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_revoked_invitation_cannot_be_accepted(self, unit_env):
        use_case = await unit_env.get(AcceptInvitationUseCase)
        _, bob, invitation = await _setup(unit_env, status=InvitationStatus.REVOKED)

        with pytest.raises(InvitationNotActionableError):
            await use_case.execute(
                AcceptInvitationRequest(
                    user_id=str(bob.id), token=invitation.token.root
                )
            )

    @pytest.mark.asyncio
    async def test_failed_link_leaves_invitation_pending(self, unit_env):
        """A partner claimed between the checks and the link keeps the token usable."""
        # Arrange
        use_case = await unit_env.get(AcceptInvitationUseCase)
        user_service = await unit_env.get(UserService)
        partnership_service = await unit_env.get(PartnershipService)
        partnerships = await unit_env.get(PartnershipRepository)
        invitations = await unit_env.get(InvitationRepository)
        alice, bob, invitation = await _setup(unit_env)
        carol = await user_service.save(make_user("carol@example.com", "Carol"))

        create = partnerships.create

        async def racing_create(partnership):
            # Another request links carol and bob first
            now = utcnow()
            await create(
                Partnership(
                    id=PartnershipId(uuid4()),
                    user1_id=carol.id,
                    user2_id=bob.id,
                    created_at=now,
                    updated_at=now,
                )
            )
            return await create(partnership)

        partnerships.create = racing_create

        # Act
        with pytest.raises(PartnershipConflictError):
            await use_case.execute(
                AcceptInvitationRequest(
                    user_id=str(bob.id), token=invitation.token.root
                )
            )

        # Assert
        stored = await invitations.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.PENDING
        assert stored.accepted_by_user_id is None
        partnership = await partnership_service.get_for_user(bob.id)
        assert partnership is None or not partnership.involves(alice.id)
