"""Strongly typed identifiers for Paire domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
InvitationId = NewType("InvitationId", UUID)
PartnershipId = NewType("PartnershipId", UUID)
