"""Update profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from paire.application.usecase.profile.get_profile import ProfileResponse
from paire.domain.service import UserService
from paire.domain.value import UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    user_id: str  # From authenticated user
    display_name: str | None = Field(default=None, max_length=100)
    avatar_url: str | None = Field(default=None, max_length=2048)


class UpdateProfileUseCase:
    """Use case for updating the caller's profile.

    Setting a display name is what unlocks sending invitations. Email is
    owned by the identity provider and cannot be changed here.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """Execute update profile flow.

        Args:
            request: Request with user ID and fields to update

        Returns:
            Updated profile

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            display_name=request.display_name,
            avatar_url=request.avatar_url,
        )
        return ProfileResponse.from_profile(user)
