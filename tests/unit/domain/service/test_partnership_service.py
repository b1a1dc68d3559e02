"""Tests for partnership domain service."""

from uuid import uuid4

import pytest

from paire.domain.error import NotFoundError, PartnershipConflictError
from paire.domain.service import PartnershipService
from paire.domain.value import PartnershipId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPartnershipService:
    """Tests for PartnershipService."""

    @pytest.mark.asyncio
    async def test_link_creates_partnership(self, unit_env):
        """The inviter is user1 and the invitee user2."""
        service = await unit_env.get(PartnershipService)
        inviter_id, invitee_id = UserId(uuid4()), UserId(uuid4())

        partnership = await service.link(inviter_id, invitee_id)

        assert partnership.user1_id == inviter_id
        assert partnership.user2_id == invitee_id
        assert await service.get_for_user(inviter_id) == partnership
        assert await service.get_for_user(invitee_id) == partnership

    @pytest.mark.asyncio
    async def test_user_belongs_to_at_most_one_partnership(self, unit_env):
        service = await unit_env.get(PartnershipService)
        alice, bob, carol = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        await service.link(alice, bob)

        with pytest.raises(PartnershipConflictError):
            await service.link(carol, bob)
        with pytest.raises(PartnershipConflictError):
            await service.link(alice, carol)

        assert await service.get_for_user(carol) is None

    @pytest.mark.asyncio
    async def test_cannot_partner_with_self(self, unit_env):
        service = await unit_env.get(PartnershipService)
        user_id = UserId(uuid4())

        with pytest.raises(PartnershipConflictError):
            await service.link(user_id, user_id)

    @pytest.mark.asyncio
    async def test_either_member_can_end(self, unit_env):
        """Ending frees both users."""
        service = await unit_env.get(PartnershipService)
        alice, bob = UserId(uuid4()), UserId(uuid4())
        partnership = await service.link(alice, bob)

        await service.end(partnership.id, bob)

        assert await service.get_for_user(alice) is None
        assert await service.get_for_user(bob) is None
        # Both can link again
        await service.link(bob, alice)

    @pytest.mark.asyncio
    async def test_non_member_cannot_end(self, unit_env):
        service = await unit_env.get(PartnershipService)
        partnership = await service.link(UserId(uuid4()), UserId(uuid4()))

        with pytest.raises(NotFoundError):
            await service.end(partnership.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_end_unknown_partnership(self, unit_env):
        service = await unit_env.get(PartnershipService)

        with pytest.raises(NotFoundError):
            await service.end(PartnershipId(uuid4()), UserId(uuid4()))
