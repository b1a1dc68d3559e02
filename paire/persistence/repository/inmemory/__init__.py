"""In-memory repository implementations for testing."""

from .invitation import InMemoryInvitationRepository
from .partnership import InMemoryPartnershipRepository
from .store import InMemoryStore
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryInvitationRepository",
    "InMemoryPartnershipRepository",
    "InMemoryStore",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]
