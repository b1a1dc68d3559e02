"""Domain value objects for the partnership protocol.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from paire.domain.value.common import RootValueObject

# Deliberately permissive: one "@", something on both sides, a dot in the domain.
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_valid_email(value: str | None) -> bool:
    """Check an email address is syntactically plausible."""
    if not value:
        return False
    return EMAIL_PATTERN.match(value.strip()) is not None


def emails_match(left: str | None, right: str | None) -> bool:
    """Case-insensitive email comparison. Missing values never match."""
    if not left or not right:
        return False
    return left.strip().lower() == right.strip().lower()


class InvitationStatus(str, Enum):
    """Stored status of an invitation.

    Expiry is also derived from timestamps at read time, so a PENDING
    invitation may already be expired.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    REVOKED = "revoked"


class Email(RootValueObject[str]):
    """Email address, normalised to lower case.

    Email is the comparison key that ties an invitation to its invitee.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate format and normalise case."""
        v = v.strip()
        if not is_valid_email(v):
            raise ValueError("Invalid email address")
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        return v.lower()


class InvitationToken(RootValueObject[str]):
    """Opaque URL-safe invitation token.

    The token is the only credential needed to act on an invitation and
    carries no decodable state.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    def redacted(self) -> str:
        """Token prefix safe for logs."""
        return self.root[:8] + "..."
