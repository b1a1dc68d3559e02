"""Domain model entities for Paire."""

from paire.domain.model.invitation import Invitation
from paire.domain.model.partnership import Partnership
from paire.domain.model.user import UserProfile

__all__ = [
    "UserProfile",
    "Invitation",
    "Partnership",
]
