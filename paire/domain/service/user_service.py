"""User domain service."""

import logfire

from paire.domain.error import NotFoundError
from paire.domain.model import UserProfile
from paire.domain.model.common import utcnow
from paire.domain.repository import UserRepository
from paire.domain.value import Email, UserId

from .base import Service


class UserService(Service):
    """Domain service for user profile operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> UserProfile:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User profile

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> UserProfile | None:
        """Get user by ID, or None when unknown."""
        return await self.user_repository.find_by_id(user_id)

    async def find_by_email(self, email: Email) -> UserProfile | None:
        """Get user by email.

        Args:
            email: Normalised email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.find_by_email"):
            return await self.user_repository.find_by_email(email)

    async def save(self, user: UserProfile) -> UserProfile:
        """Save a user profile."""
        return await self.user_repository.save(user)

    async def update_profile(
        self,
        user_id: UserId,
        display_name: str | None = None,
        avatar_url: str | None = None,
    ) -> UserProfile:
        """Update profile fields. ``None`` leaves a field unchanged.

        Args:
            user_id: User to update
            display_name: New display name (stripped)
            avatar_url: New avatar URL

        Returns:
            Updated profile

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            updates: dict = {}
            if display_name is not None:
                updates["display_name"] = display_name.strip() or None
            if avatar_url is not None:
                updates["avatar_url"] = avatar_url or None

            if not updates:
                return user

            updates["updated_at"] = utcnow()
            updated = user.model_copy(update=updates)
            saved = await self.user_repository.save(updated)
            logfire.info(
                "Profile updated", user_id=str(user_id), fields=sorted(updates)
            )
            return saved
