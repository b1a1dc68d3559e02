"""Get profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from paire.domain.model import UserProfile
from paire.domain.service import UserService
from paire.domain.value import UserId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str  # From authenticated user


class ProfileResponse(BaseModel):
    """The caller's own profile."""

    id: str
    email: str
    display_name: str | None
    avatar_url: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_profile(cls, user: UserProfile) -> "ProfileResponse":
        return cls(
            id=str(user.id),
            email=user.email.root,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class GetProfileUseCase:
    """Use case for reading the caller's profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Raises NotFoundError if the user does not exist."""
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return ProfileResponse.from_profile(user)
