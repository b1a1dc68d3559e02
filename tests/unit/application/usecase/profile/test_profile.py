"""Tests for profile use cases."""

from uuid import uuid4

import pytest

from paire.application.usecase.profile import (
    GetProfileRequest,
    GetProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from paire.domain.error import NotFoundError
from paire.domain.service import UserService
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestProfileUseCases:
    """Tests for GetProfileUseCase and UpdateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_get_profile(self, unit_env):
        use_case = await unit_env.get(GetProfileUseCase)
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user("alice@example.com", "Alice"))

        response = await use_case.execute(GetProfileRequest(user_id=str(user.id)))

        assert response.email == "alice@example.com"
        assert response.display_name == "Alice"

    @pytest.mark.asyncio
    async def test_set_display_name(self, unit_env):
        """Setting a display name is what unlocks inviting."""
        use_case = await unit_env.get(UpdateProfileUseCase)
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user(display_name=None))

        response = await use_case.execute(
            UpdateProfileRequest(user_id=str(user.id), display_name="Alice")
        )

        assert response.display_name == "Alice"
        assert (await user_service.get_by_id(user.id)).has_display_name

    @pytest.mark.asyncio
    async def test_omitted_fields_unchanged(self, unit_env):
        use_case = await unit_env.get(UpdateProfileUseCase)
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user(display_name="Alice"))

        response = await use_case.execute(
            UpdateProfileRequest(
                user_id=str(user.id), avatar_url="https://img.example.com/a.png"
            )
        )

        assert response.display_name == "Alice"
        assert response.avatar_url == "https://img.example.com/a.png"

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(GetProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetProfileRequest(user_id=str(uuid4())))
