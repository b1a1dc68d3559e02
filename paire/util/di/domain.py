"""Domain layer DI providers."""

from dishka import Scope, provide

from paire.config import AuthSettings
from paire.domain.repository import (
    InvitationRepository,
    PartnershipRepository,
    UserRepository,
)
from paire.domain.service import (
    EmailClient,
    InvitationService,
    JWTService,
    NotificationService,
    PartnershipService,
    UserService,
)
from paire.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_invitation_service(
        self, invitation_repository: InvitationRepository
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(invitation_repository=invitation_repository)

    @provide
    def get_partnership_service(
        self, partnership_repository: PartnershipRepository
    ) -> PartnershipService:
        """Provide partnership domain service."""
        return PartnershipService(partnership_repository=partnership_repository)

    @provide
    def get_notification_service(self, email_client: EmailClient) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(email_client=email_client)
