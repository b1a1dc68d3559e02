"""Tests for user domain service."""

from uuid import uuid4

import pytest

from paire.domain.error import NotFoundError
from paire.domain.service import UserService
from paire.domain.value import Email, UserId
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, unit_env):
        service = await unit_env.get(UserService)
        user = await service.save(make_user(email="alice@example.com"))

        found = await service.find_by_email(Email(root="ALICE@example.com"))

        assert found == user

    @pytest.mark.asyncio
    async def test_get_by_id_raises_for_unknown(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_update_profile_strips_display_name(self, unit_env):
        service = await unit_env.get(UserService)
        user = await service.save(make_user(display_name=None))

        updated = await service.update_profile(user.id, display_name="  Alice  ")

        assert updated.display_name == "Alice"
        assert updated.updated_at >= user.updated_at

    @pytest.mark.asyncio
    async def test_update_profile_without_changes_returns_user(self, unit_env):
        service = await unit_env.get(UserService)
        user = await service.save(make_user())

        assert await service.update_profile(user.id) == user
