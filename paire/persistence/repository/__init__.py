"""PostgreSQL repository implementations."""

from paire.persistence.repository.invitation import PostgresInvitationRepository
from paire.persistence.repository.partnership import PostgresPartnershipRepository
from paire.persistence.repository.transaction import PostgresTransactionManager
from paire.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresInvitationRepository",
    "PostgresPartnershipRepository",
    "PostgresTransactionManager",
]
