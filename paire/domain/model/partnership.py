"""Partnership entity."""

from datetime import datetime

from pydantic import Field

from paire.domain.model.common import DomainModel, utcnow
from paire.domain.value import PartnershipId, UserId


class Partnership(DomainModel):
    """Active link between exactly two users.

    A user belongs to at most one partnership. Either member may end it,
    after which both are free to send or accept new invitations.
    """

    id: PartnershipId
    user1_id: UserId  # Inviter
    user2_id: UserId  # Invitee
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def involves(self, user_id: UserId) -> bool:
        """Whether the user is one of the two members."""
        return user_id in (self.user1_id, self.user2_id)

    def partner_of(self, user_id: UserId) -> UserId:
        """Return the other member.

        Raises:
            ValueError: If the user is not a member
        """
        if user_id == self.user1_id:
            return self.user2_id
        if user_id == self.user2_id:
            return self.user1_id
        raise ValueError(f"User {user_id} is not part of partnership {self.id}")
