"""Domain services."""

from .base import Service
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .notification_service import EmailClient, EmailMessage, NotificationService
from .partnership_service import PartnershipService
from .user_service import UserService

__all__ = [
    "EmailClient",
    "EmailMessage",
    "InvitationService",
    "JWTService",
    "NotificationService",
    "PartnershipService",
    "Service",
    "UserService",
]
