"""User-visible message categories."""

from enum import Enum

from pydantic import BaseModel


class MessageCategory(str, Enum):
    """What a view model is telling the user."""

    LOAD_ERROR = "load_error"
    INVALID_EMAIL = "invalid_email"
    SELF_INVITE = "self_invite"
    DISPLAY_NAME_REQUIRED = "display_name_required"
    SEND_FAILED = "send_failed"
    ACCEPT_FAILED = "accept_failed"
    DISCONNECT_FAILED = "disconnect_failed"
    INVITE_SENT = "invite_sent"
    INVITATION_ACCEPTED = "invitation_accepted"
    DISCONNECTED = "disconnected"

    @property
    def is_error(self) -> bool:
        return self not in _SUCCESS_CATEGORIES

    @property
    def default_text(self) -> str:
        return _DEFAULT_TEXT[self]


_SUCCESS_CATEGORIES = {
    MessageCategory.INVITE_SENT,
    MessageCategory.INVITATION_ACCEPTED,
    MessageCategory.DISCONNECTED,
}

_DEFAULT_TEXT = {
    MessageCategory.LOAD_ERROR: "Could not load your partnership",
    MessageCategory.INVALID_EMAIL: "Please enter a valid email address",
    MessageCategory.SELF_INVITE: "You cannot invite yourself",
    MessageCategory.DISPLAY_NAME_REQUIRED: "Set a display name in your profile before inviting a partner",
    MessageCategory.SEND_FAILED: "Could not send the invitation",
    MessageCategory.ACCEPT_FAILED: "Could not accept the invitation",
    MessageCategory.DISCONNECT_FAILED: "Could not end the partnership",
    MessageCategory.INVITE_SENT: "Invitation sent",
    MessageCategory.INVITATION_ACCEPTED: "Partnership created",
    MessageCategory.DISCONNECTED: "Partnership ended",
}


class PanelMessage(BaseModel):
    """A message with its category. ``text`` may carry server detail."""

    category: MessageCategory
    text: str

    @classmethod
    def of(cls, category: MessageCategory, text: str | None = None) -> "PanelMessage":
        return cls(category=category, text=text or category.default_text)

    @property
    def is_error(self) -> bool:
        return self.category.is_error
