"""User profile repository interface."""

from abc import ABC, abstractmethod

from paire.domain.model.user import UserProfile
from paire.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for UserProfile entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> UserProfile | None:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> UserProfile | None:
        """Find a user by (normalised) email.

        Args:
            email: The email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: UserProfile) -> UserProfile:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
