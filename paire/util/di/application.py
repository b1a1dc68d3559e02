"""Application layer DI providers."""

from dishka import Scope, provide

from paire.application.usecase.partnership import (
    AcceptInvitationUseCase,
    EndPartnershipUseCase,
    GetInvitationDetailsUseCase,
    GetMyPartnershipUseCase,
    GetPendingInvitationsUseCase,
    ListSentInvitationsUseCase,
    RevokeInvitationUseCase,
    SendInvitationUseCase,
)
from paire.application.usecase.profile import GetProfileUseCase, UpdateProfileUseCase
from paire.config import Settings
from paire.domain.repository import TransactionManager
from paire.domain.service import (
    InvitationService,
    NotificationService,
    PartnershipService,
    UserService,
)
from paire.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Partnership use cases
    @provide(scope=Scope.REQUEST)
    def get_send_invitation_use_case(
        self,
        user_service: UserService,
        invitation_service: InvitationService,
        partnership_service: PartnershipService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> SendInvitationUseCase:
        """Provide send invitation use case."""
        return SendInvitationUseCase(
            user_service=user_service,
            invitation_service=invitation_service,
            partnership_service=partnership_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_invitation_details_use_case(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> GetInvitationDetailsUseCase:
        """Provide get invitation details use case."""
        return GetInvitationDetailsUseCase(
            invitation_service=invitation_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_pending_invitations_use_case(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> GetPendingInvitationsUseCase:
        """Provide get pending invitations use case."""
        return GetPendingInvitationsUseCase(
            invitation_service=invitation_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_invitation_use_case(
        self,
        user_service: UserService,
        invitation_service: InvitationService,
        partnership_service: PartnershipService,
        transactions: TransactionManager,
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(
            user_service=user_service,
            invitation_service=invitation_service,
            partnership_service=partnership_service,
            transactions=transactions,
        )

    @provide(scope=Scope.REQUEST)
    def get_my_partnership_use_case(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> GetMyPartnershipUseCase:
        """Provide get my partnership use case."""
        return GetMyPartnershipUseCase(
            partnership_service=partnership_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_end_partnership_use_case(
        self, partnership_service: PartnershipService
    ) -> EndPartnershipUseCase:
        """Provide end partnership use case."""
        return EndPartnershipUseCase(partnership_service=partnership_service)

    @provide(scope=Scope.REQUEST)
    def get_list_sent_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> ListSentInvitationsUseCase:
        """Provide list sent invitations use case."""
        return ListSentInvitationsUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_revoke_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> RevokeInvitationUseCase:
        """Provide revoke invitation use case."""
        return RevokeInvitationUseCase(invitation_service=invitation_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_profile_use_case(self, user_service: UserService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)
