"""Domain value objects for Paire."""

from paire.domain.value.identifiers import InvitationId, PartnershipId, UserId
from paire.domain.value.types import (
    Email,
    InvitationStatus,
    InvitationToken,
    emails_match,
    is_valid_email,
)

__all__ = [
    # Identifiers
    "UserId",
    "InvitationId",
    "PartnershipId",
    # Types
    "Email",
    "InvitationStatus",
    "InvitationToken",
    # Helpers
    "emails_match",
    "is_valid_email",
]
