"""Partnership client: API access and the view models behind the screens."""

from paire.client.api import HttpPartnershipApi, PartnershipApi
from paire.client.error import (
    ApiError,
    ApiNotFoundError,
    ApiUnauthorizedError,
    ClientError,
    InvitationValidationError,
)
from paire.client.identity import IdentityContext
from paire.client.messages import MessageCategory, PanelMessage
from paire.client.navigation import Navigator, login_url, partnership_url
from paire.client.panel import PanelState, PartnershipStatePanel
from paire.client.resolution import (
    AttemptAccept,
    InvitationResolutionFlow,
    RedirectToLogin,
    RedirectToPartnership,
    ResolutionOutcome,
    ShowSuccess,
)

__all__ = [
    "ApiError",
    "ApiNotFoundError",
    "ApiUnauthorizedError",
    "AttemptAccept",
    "ClientError",
    "HttpPartnershipApi",
    "IdentityContext",
    "InvitationResolutionFlow",
    "InvitationValidationError",
    "MessageCategory",
    "Navigator",
    "PanelMessage",
    "PanelState",
    "PartnershipApi",
    "PartnershipStatePanel",
    "RedirectToLogin",
    "RedirectToPartnership",
    "ResolutionOutcome",
    "ShowSuccess",
    "login_url",
    "partnership_url",
]
