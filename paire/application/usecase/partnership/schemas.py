"""Response items shared by the partnership use cases."""

from datetime import datetime

from pydantic import BaseModel

from paire.domain.model import Invitation, Partnership, UserProfile
from paire.domain.model.common import utcnow
from paire.domain.service import UserService
from paire.domain.value import InvitationStatus

UNKNOWN = "Unknown"


class InvitationItem(BaseModel):
    """Invitation as seen by the invitee (preview and pending list)."""

    id: str
    token: str
    inviter_id: str
    inviter_name: str
    inviter_email: str
    invitee_email: str
    status: InvitationStatus
    created_at: datetime
    expires_at: datetime
    is_expired: bool  # Derived from expires_at at read time, not from status


class ProfileSummary(BaseModel):
    """Public part of a partnership member's profile."""

    id: str
    email: str
    display_name: str | None = None
    avatar_url: str | None = None


class PartnershipResponse(BaseModel):
    """Partnership with both members' profiles."""

    id: str
    user1_id: str
    user2_id: str
    user1: ProfileSummary | None = None
    user2: ProfileSummary | None = None
    created_at: datetime


def to_profile_summary(user: UserProfile | None) -> ProfileSummary | None:
    """Convert a profile to its public summary."""
    if user is None:
        return None
    return ProfileSummary(
        id=str(user.id),
        email=user.email.root,
        display_name=user.display_name,
        avatar_url=user.avatar_url,
    )


async def build_invitation_item(
    invitation: Invitation,
    user_service: UserService,
    now: datetime | None = None,
) -> InvitationItem:
    """Resolve the inviter's profile and compute expiry for an invitation."""
    now = now or utcnow()
    inviter = await user_service.find_by_id(invitation.inviter_id)
    return InvitationItem(
        id=str(invitation.id),
        token=invitation.token.root,
        inviter_id=str(invitation.inviter_id),
        inviter_name=(inviter.display_name if inviter else None) or UNKNOWN,
        inviter_email=inviter.email.root if inviter else UNKNOWN,
        invitee_email=invitation.invitee_email.root,
        status=invitation.status,
        created_at=invitation.created_at,
        expires_at=invitation.expires_at,
        is_expired=invitation.is_expired_at(now),
    )


async def build_partnership_response(
    partnership: Partnership, user_service: UserService
) -> PartnershipResponse:
    """Attach both members' profiles to a partnership."""
    user1 = await user_service.find_by_id(partnership.user1_id)
    user2 = await user_service.find_by_id(partnership.user2_id)
    return PartnershipResponse(
        id=str(partnership.id),
        user1_id=str(partnership.user1_id),
        user2_id=str(partnership.user2_id),
        user1=to_profile_summary(user1),
        user2=to_profile_summary(user2),
        created_at=partnership.created_at,
    )
