"""Partnership invitation entity.

An invitation is an outstanding offer from one user to link accounts with
whoever owns ``invitee_email``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from paire.domain.model.common import DomainModel, utcnow
from paire.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)


class Invitation(DomainModel):
    """Partnership invitation.

    Business rules:
    - The token is the sole credential needed to act on the invitation
    - Only the user whose email matches ``invitee_email`` may accept it
    - It can be accepted at most once
    - It stops being actionable at ``expires_at`` regardless of ``status``;
      the record is kept
    """

    id: InvitationId
    token: InvitationToken
    inviter_id: UserId
    invitee_email: Email
    status: InvitationStatus = InvitationStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    accepted_by_user_id: Optional[UserId] = None

    def is_expired_at(self, now: datetime) -> bool:
        """Whether the invitation has expired at ``now``."""
        return now >= self.expires_at

    @property
    def is_expired(self) -> bool:
        """Expiry evaluated against the current time, not the stored status."""
        return self.is_expired_at(utcnow())

    def is_actionable(self, now: datetime | None = None) -> bool:
        """Pending and not yet expired."""
        now = now or utcnow()
        return self.status == InvitationStatus.PENDING and not self.is_expired_at(now)
