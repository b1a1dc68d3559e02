"""Integration tests for the PostgreSQL repositories.

Run against a migrated database:

    DATABASE__URL=postgresql+asyncpg://... pytest tests/integration
"""

import os
from datetime import timedelta
from uuid import uuid4

import pytest

from paire.domain.error import PartnershipConflictError
from paire.domain.model import Partnership
from paire.domain.model.common import utcnow
from paire.domain.repository import (
    InvitationRepository,
    PartnershipRepository,
    TransactionManager,
    UserRepository,
)
from paire.domain.value import InvitationStatus, PartnershipId
from tests.factories import make_invitation, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="needs PostgreSQL (DATABASE__URL)"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def unique_email(name: str) -> str:
    return f"{name}-{uuid4().hex[:8]}@example.com"


class TestInvitationRepositoryIntegration:
    """PostgresInvitationRepository against a real database."""

    @pytest.mark.asyncio
    async def test_find_by_token_round_trips_value_objects(self, integration_env):
        # Arrange
        users = await integration_env.get(UserRepository)
        invitations = await integration_env.get(InvitationRepository)
        alice = await users.save(make_user(unique_email("alice")))
        invitation = make_invitation(alice.id, unique_email("bob"))

        # Act
        await invitations.save(invitation)
        found = await invitations.find_by_token(invitation.token)

        # Assert
        assert found is not None
        assert found.id == invitation.id
        assert found.invitee_email == invitation.invitee_email
        assert found.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_transition_only_from_pending(self, integration_env):
        users = await integration_env.get(UserRepository)
        invitations = await integration_env.get(InvitationRepository)
        alice = await users.save(make_user(unique_email("alice")))
        bob = await users.save(make_user(unique_email("bob"), "Bob"))
        invitation = await invitations.save(
            make_invitation(alice.id, bob.email.root)
        )

        first = await invitations.transition_status(
            invitation.id,
            InvitationStatus.ACCEPTED,
            accepted_by_user_id=bob.id,
            accepted_at=utcnow(),
        )
        second = await invitations.transition_status(
            invitation.id, InvitationStatus.REVOKED
        )

        assert first is True
        assert second is False
        stored = await invitations.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.ACCEPTED
        assert stored.accepted_by_user_id == bob.id

    @pytest.mark.asyncio
    async def test_pending_for_invitee_excludes_expired(self, integration_env):
        users = await integration_env.get(UserRepository)
        invitations = await integration_env.get(InvitationRepository)
        alice = await users.save(make_user(unique_email("alice")))
        bob_email = unique_email("bob")
        live = await invitations.save(make_invitation(alice.id, bob_email))
        await invitations.save(
            make_invitation(alice.id, bob_email, expires_in=timedelta(days=-1))
        )

        pending = await invitations.find_pending_for_invitee(
            live.invitee_email, utcnow()
        )

        assert [inv.id for inv in pending] == [live.id]


class TestPartnershipRepositoryIntegration:
    """PostgresPartnershipRepository against a real database."""

    @pytest.mark.asyncio
    async def test_one_partnership_per_user(self, integration_env):
        users = await integration_env.get(UserRepository)
        partnerships = await integration_env.get(PartnershipRepository)
        alice = await users.save(make_user(unique_email("alice")))
        bob = await users.save(make_user(unique_email("bob"), "Bob"))
        carol = await users.save(make_user(unique_email("carol"), "Carol"))
        now = utcnow()

        created = await partnerships.create(
            Partnership(
                id=PartnershipId(uuid4()),
                user1_id=alice.id,
                user2_id=bob.id,
                created_at=now,
                updated_at=now,
            )
        )

        with pytest.raises(PartnershipConflictError):
            await partnerships.create(
                Partnership(
                    id=PartnershipId(uuid4()),
                    user1_id=carol.id,
                    user2_id=bob.id,
                    created_at=now,
                    updated_at=now,
                )
            )

        assert (await partnerships.find_by_user(bob.id)).id == created.id
        assert await partnerships.delete(created.id) is True
        assert await partnerships.find_by_user(alice.id) is None


class TestTransactionManagerIntegration:
    """PostgresTransactionManager savepoints."""

    @pytest.mark.asyncio
    async def test_failed_block_discards_consume(self, integration_env):
        users = await integration_env.get(UserRepository)
        invitations = await integration_env.get(InvitationRepository)
        transactions = await integration_env.get(TransactionManager)
        alice = await users.save(make_user(unique_email("alice")))
        bob = await users.save(make_user(unique_email("bob"), "Bob"))
        invitation = await invitations.save(
            make_invitation(alice.id, bob.email.root)
        )

        with pytest.raises(PartnershipConflictError):
            async with transactions.atomic():
                await invitations.transition_status(
                    invitation.id,
                    InvitationStatus.ACCEPTED,
                    accepted_by_user_id=bob.id,
                    accepted_at=utcnow(),
                )
                raise PartnershipConflictError("linked elsewhere")

        stored = await invitations.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.PENDING
