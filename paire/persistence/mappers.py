"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from paire.domain.model import Invitation, Partnership, UserProfile
from paire.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    PartnershipId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> UserProfile:
    """Convert database row to UserProfile domain model."""
    return UserProfile(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        display_name=row.get("display_name"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: UserProfile) -> Dict[str, Any]:
    """Convert UserProfile domain model to database dict."""
    return user.model_dump()


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        token=InvitationToken(root=row["token"]),
        inviter_id=UserId(_uuid(row["inviter_id"])),
        invitee_email=Email(row["invitee_email"]),
        status=InvitationStatus(row["status"]),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        accepted_at=row.get("accepted_at"),
        accepted_by_user_id=UserId(_uuid(row["accepted_by_user_id"]))
        if row.get("accepted_by_user_id")
        else None,
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    RootValueObjects dump to their primitive; the status enum to its value.
    """
    data = invitation.model_dump()
    data["status"] = invitation.status.value
    return data


def row_to_partnership(row: Dict[str, Any]) -> Partnership:
    """Convert database row to Partnership domain model."""
    return Partnership(
        id=PartnershipId(_uuid(row["id"])),
        user1_id=UserId(_uuid(row["user1_id"])),
        user2_id=UserId(_uuid(row["user2_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def partnership_to_dict(partnership: Partnership) -> Dict[str, Any]:
    """Convert Partnership domain model to database dict."""
    return partnership.model_dump()
