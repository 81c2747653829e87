"""Application layer DI providers."""

from dishka import Scope, provide

from tour.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from tour.application.usecase.invitation import (
    AcceptInvitationUseCase,
    CancelInvitationUseCase,
    DeclineInvitationUseCase,
    GetInvitationByTokenUseCase,
    GetPendingInvitationsUseCase,
    ListTourInvitationsUseCase,
    ResendInvitationUseCase,
    SendInvitationsUseCase,
    VerifyInvitationOTPUseCase,
)
from tour.application.usecase.tag import (
    AddTourTagUseCase,
    ListTourTagsUseCase,
    RemoveTourTagUseCase,
    SearchTagsUseCase,
)
from tour.application.usecase.tour import (
    CreateTourUseCase,
    DeleteTourUseCase,
    GetTourUseCase,
    ListParticipantsUseCase,
    ListToursUseCase,
    MarkTourViewedUseCase,
    RemoveParticipantUseCase,
    SetVotingLockUseCase,
    UpdateTourUseCase,
)
from tour.application.usecase.user import GetCurrentUserUseCase
from tour.application.usecase.vote import GetVotesUseCase, ToggleVoteUseCase
from tour.config import InvitationSettings
from tour.domain.service import (
    CommentService,
    InvitationService,
    JWTService,
    TagService,
    TourService,
    UserService,
    VoteService,
)
from tour.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Session use cases
    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Tour use cases
    @provide
    def get_create_tour_use_case(
        self, tour_service: TourService, user_service: UserService
    ) -> CreateTourUseCase:
        """Provide create tour use case."""
        return CreateTourUseCase(tour_service=tour_service, user_service=user_service)

    @provide
    def get_list_tours_use_case(self, tour_service: TourService) -> ListToursUseCase:
        """Provide list tours use case."""
        return ListToursUseCase(tour_service=tour_service)

    @provide
    def get_get_tour_use_case(
        self, tour_service: TourService, vote_service: VoteService
    ) -> GetTourUseCase:
        """Provide get tour use case."""
        return GetTourUseCase(tour_service=tour_service, vote_service=vote_service)

    @provide
    def get_update_tour_use_case(self, tour_service: TourService) -> UpdateTourUseCase:
        """Provide update tour use case."""
        return UpdateTourUseCase(tour_service=tour_service)

    @provide
    def get_delete_tour_use_case(self, tour_service: TourService) -> DeleteTourUseCase:
        """Provide delete tour use case."""
        return DeleteTourUseCase(tour_service=tour_service)

    @provide
    def get_set_voting_lock_use_case(
        self, tour_service: TourService
    ) -> SetVotingLockUseCase:
        """Provide voting lock use case."""
        return SetVotingLockUseCase(tour_service=tour_service)

    @provide
    def get_mark_tour_viewed_use_case(
        self, tour_service: TourService
    ) -> MarkTourViewedUseCase:
        """Provide mark tour viewed use case."""
        return MarkTourViewedUseCase(tour_service=tour_service)

    # Participant use cases
    @provide
    def get_list_participants_use_case(
        self, tour_service: TourService, user_service: UserService
    ) -> ListParticipantsUseCase:
        """Provide list participants use case."""
        return ListParticipantsUseCase(
            tour_service=tour_service, user_service=user_service
        )

    @provide
    def get_remove_participant_use_case(
        self, tour_service: TourService, vote_service: VoteService
    ) -> RemoveParticipantUseCase:
        """Provide remove participant use case."""
        return RemoveParticipantUseCase(
            tour_service=tour_service, vote_service=vote_service
        )

    # Vote use cases
    @provide
    def get_toggle_vote_use_case(
        self, tour_service: TourService, vote_service: VoteService
    ) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(tour_service=tour_service, vote_service=vote_service)

    @provide
    def get_get_votes_use_case(
        self,
        tour_service: TourService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> GetVotesUseCase:
        """Provide get votes use case."""
        return GetVotesUseCase(
            tour_service=tour_service,
            vote_service=vote_service,
            user_service=user_service,
        )

    # Comment use cases
    @provide
    def get_list_comments_use_case(
        self,
        tour_service: TourService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            tour_service=tour_service,
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide
    def get_create_comment_use_case(
        self,
        tour_service: TourService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            tour_service=tour_service,
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide
    def get_update_comment_use_case(
        self,
        tour_service: TourService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            tour_service=tour_service,
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide
    def get_delete_comment_use_case(
        self, tour_service: TourService, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            tour_service=tour_service, comment_service=comment_service
        )

    # Tag use cases
    @provide
    def get_list_tour_tags_use_case(
        self, tour_service: TourService, tag_service: TagService
    ) -> ListTourTagsUseCase:
        """Provide list tour tags use case."""
        return ListTourTagsUseCase(tour_service=tour_service, tag_service=tag_service)

    @provide
    def get_add_tour_tag_use_case(
        self, tour_service: TourService, tag_service: TagService
    ) -> AddTourTagUseCase:
        """Provide add tour tag use case."""
        return AddTourTagUseCase(tour_service=tour_service, tag_service=tag_service)

    @provide
    def get_remove_tour_tag_use_case(
        self, tour_service: TourService, tag_service: TagService
    ) -> RemoveTourTagUseCase:
        """Provide remove tour tag use case."""
        return RemoveTourTagUseCase(tour_service=tour_service, tag_service=tag_service)

    @provide
    def get_search_tags_use_case(self, tag_service: TagService) -> SearchTagsUseCase:
        """Provide tag search use case."""
        return SearchTagsUseCase(tag_service=tag_service)

    # Owner invitation use cases
    @provide
    def get_send_invitations_use_case(
        self,
        tour_service: TourService,
        invitation_service: InvitationService,
        invitation_settings: InvitationSettings,
    ) -> SendInvitationsUseCase:
        """Provide send invitations use case."""
        return SendInvitationsUseCase(
            tour_service=tour_service,
            invitation_service=invitation_service,
            invitation_settings=invitation_settings,
        )

    @provide
    def get_list_tour_invitations_use_case(
        self, tour_service: TourService, invitation_service: InvitationService
    ) -> ListTourInvitationsUseCase:
        """Provide list tour invitations use case."""
        return ListTourInvitationsUseCase(
            tour_service=tour_service, invitation_service=invitation_service
        )

    @provide
    def get_cancel_invitation_use_case(
        self, invitation_service: InvitationService, tour_service: TourService
    ) -> CancelInvitationUseCase:
        """Provide cancel invitation use case."""
        return CancelInvitationUseCase(
            invitation_service=invitation_service, tour_service=tour_service
        )

    @provide
    def get_resend_invitation_use_case(
        self, invitation_service: InvitationService, tour_service: TourService
    ) -> ResendInvitationUseCase:
        """Provide resend invitation use case."""
        return ResendInvitationUseCase(
            invitation_service=invitation_service, tour_service=tour_service
        )

    # Invitee use cases
    @provide
    def get_pending_invitations_use_case(
        self,
        user_service: UserService,
        tour_service: TourService,
        invitation_service: InvitationService,
    ) -> GetPendingInvitationsUseCase:
        """Provide get pending invitations use case."""
        return GetPendingInvitationsUseCase(
            user_service=user_service,
            tour_service=tour_service,
            invitation_service=invitation_service,
        )

    @provide
    def get_invitation_by_token_use_case(
        self,
        invitation_service: InvitationService,
        tour_service: TourService,
        user_service: UserService,
    ) -> GetInvitationByTokenUseCase:
        """Provide get invitation by token use case."""
        return GetInvitationByTokenUseCase(
            invitation_service=invitation_service,
            tour_service=tour_service,
            user_service=user_service,
        )

    @provide
    def get_accept_invitation_use_case(
        self,
        invitation_service: InvitationService,
        tour_service: TourService,
        user_service: UserService,
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(
            invitation_service=invitation_service,
            tour_service=tour_service,
            user_service=user_service,
        )

    @provide
    def get_decline_invitation_use_case(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> DeclineInvitationUseCase:
        """Provide decline invitation use case."""
        return DeclineInvitationUseCase(
            invitation_service=invitation_service, user_service=user_service
        )

    @provide
    def get_verify_invitation_otp_use_case(
        self,
        invitation_service: InvitationService,
        user_service: UserService,
        jwt_service: JWTService,
    ) -> VerifyInvitationOTPUseCase:
        """Provide verify invitation OTP use case."""
        return VerifyInvitationOTPUseCase(
            invitation_service=invitation_service,
            user_service=user_service,
            jwt_service=jwt_service,
        )
