"""Repository interfaces for the Paire domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from paire.domain.repository.invitation import InvitationRepository
from paire.domain.repository.partnership import PartnershipRepository
from paire.domain.repository.transaction import TransactionManager
from paire.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "InvitationRepository",
    "PartnershipRepository",
    "TransactionManager",
]
