"""User profile entity.

Users are owned by the identity subsystem. The partnership protocol reads
their email and display name, and lets users set the display name that
invitations are sent under.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from paire.domain.model.common import DomainModel, utcnow
from paire.domain.value import Email, UserId


class UserProfile(DomainModel):
    """User profile."""

    id: UserId
    email: Email
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def has_display_name(self) -> bool:
        """Whether a non-blank display name is set."""
        return bool(self.display_name and self.display_name.strip())
