"""Partnership use cases."""

from paire.application.usecase.partnership.accept_invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
)
from paire.application.usecase.partnership.end_partnership import (
    EndPartnershipRequest,
    EndPartnershipUseCase,
)
from paire.application.usecase.partnership.get_invitation_details import (
    GetInvitationDetailsRequest,
    GetInvitationDetailsUseCase,
)
from paire.application.usecase.partnership.get_my_partnership import (
    GetMyPartnershipRequest,
    GetMyPartnershipUseCase,
)
from paire.application.usecase.partnership.get_pending_invitations import (
    GetPendingInvitationsRequest,
    GetPendingInvitationsResponse,
    GetPendingInvitationsUseCase,
)
from paire.application.usecase.partnership.list_sent_invitations import (
    ListSentInvitationsRequest,
    ListSentInvitationsResponse,
    ListSentInvitationsUseCase,
    SentInvitationItem,
)
from paire.application.usecase.partnership.revoke_invitation import (
    RevokeInvitationRequest,
    RevokeInvitationUseCase,
)
from paire.application.usecase.partnership.schemas import (
    InvitationItem,
    PartnershipResponse,
    ProfileSummary,
)
from paire.application.usecase.partnership.send_invitation import (
    INVITE_SENT_MESSAGE,
    SendInvitationRequest,
    SendInvitationResponse,
    SendInvitationUseCase,
)

__all__ = [
    "INVITE_SENT_MESSAGE",
    "AcceptInvitationRequest",
    "AcceptInvitationResponse",
    "AcceptInvitationUseCase",
    "EndPartnershipRequest",
    "EndPartnershipUseCase",
    "GetInvitationDetailsRequest",
    "GetInvitationDetailsUseCase",
    "GetMyPartnershipRequest",
    "GetMyPartnershipUseCase",
    "GetPendingInvitationsRequest",
    "GetPendingInvitationsResponse",
    "GetPendingInvitationsUseCase",
    "InvitationItem",
    "ListSentInvitationsRequest",
    "ListSentInvitationsResponse",
    "ListSentInvitationsUseCase",
    "PartnershipResponse",
    "ProfileSummary",
    "RevokeInvitationRequest",
    "RevokeInvitationUseCase",
    "SendInvitationRequest",
    "SendInvitationResponse",
    "SendInvitationUseCase",
    "SentInvitationItem",
]
