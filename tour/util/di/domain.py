"""Domain layer DI providers."""

from dishka import Scope, provide

from tour.config import AuthSettings, CSRFSettings, InvitationSettings, Settings
from tour.domain.repository import (
    CommentRepository,
    InvitationOTPRepository,
    InvitationRepository,
    ParticipantRepository,
    TagRepository,
    TourActivityRepository,
    TourRepository,
    UserRepository,
    VoteRepository,
)
from tour.domain.service import (
    CommentService,
    CSRFService,
    EmailClient,
    InvitationService,
    JWTService,
    TagService,
    TourService,
    UserService,
    VoteService,
)
from tour.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    Stateless services without repositories live for the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_csrf_service(self, csrf_settings: CSRFSettings) -> CSRFService:
        """Provide CSRF token domain service."""
        return CSRFService(csrf_settings=csrf_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_tour_service(
        self,
        tour_repository: TourRepository,
        participant_repository: ParticipantRepository,
        activity_repository: TourActivityRepository,
    ) -> TourService:
        """Provide tour domain service."""
        return TourService(
            tour_repository=tour_repository,
            participant_repository=participant_repository,
            activity_repository=activity_repository,
        )

    @provide
    def get_vote_service(self, vote_repository: VoteRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        otp_repository: InvitationOTPRepository,
        participant_repository: ParticipantRepository,
        user_repository: UserRepository,
        email_client: EmailClient,
        invitation_settings: InvitationSettings,
        settings: Settings,
    ) -> InvitationService:
        """Provide invitation domain service.

        Invitation links point at the frontend, not the API.
        """
        return InvitationService(
            invitation_repository=invitation_repository,
            otp_repository=otp_repository,
            participant_repository=participant_repository,
            user_repository=user_repository,
            email_client=email_client,
            invitation_settings=invitation_settings,
            site_url=settings.api.frontend_url,
        )
