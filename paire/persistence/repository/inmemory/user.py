"""In-memory user repository for testing."""

from typing import Optional

from paire.domain.model import UserProfile
from paire.domain.repository.user import UserRepository
from paire.domain.value import Email, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[UserProfile]:
        """Find a user by normalised email."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: UserProfile) -> UserProfile:
        """Save or update a user."""
        self._store.users[user.id] = user
        return user
