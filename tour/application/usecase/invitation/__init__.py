"""Invitation use cases."""

from tour.application.usecase.invitation.accept_invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
)
from tour.application.usecase.invitation.cancel_invitation import (
    CancelInvitationRequest,
    CancelInvitationResponse,
    CancelInvitationUseCase,
)
from tour.application.usecase.invitation.decline_invitation import (
    DeclineInvitationRequest,
    DeclineInvitationResponse,
    DeclineInvitationUseCase,
)
from tour.application.usecase.invitation.get_invitation_by_token import (
    GetInvitationByTokenRequest,
    GetInvitationByTokenResponse,
    GetInvitationByTokenUseCase,
)
from tour.application.usecase.invitation.get_pending_invitations import (
    GetPendingInvitationsRequest,
    GetPendingInvitationsResponse,
    GetPendingInvitationsUseCase,
)
from tour.application.usecase.invitation.list_tour_invitations import (
    ListTourInvitationsRequest,
    ListTourInvitationsResponse,
    ListTourInvitationsUseCase,
)
from tour.application.usecase.invitation.resend_invitation import (
    ResendInvitationRequest,
    ResendInvitationResponse,
    ResendInvitationUseCase,
)
from tour.application.usecase.invitation.send_invitations import (
    SendInvitationsRequest,
    SendInvitationsResponse,
    SendInvitationsUseCase,
)
from tour.application.usecase.invitation.verify_invitation_otp import (
    VerifyInvitationOTPRequest,
    VerifyInvitationOTPResponse,
    VerifyInvitationOTPUseCase,
)

__all__ = [
    "AcceptInvitationRequest",
    "AcceptInvitationResponse",
    "AcceptInvitationUseCase",
    "CancelInvitationRequest",
    "CancelInvitationResponse",
    "CancelInvitationUseCase",
    "DeclineInvitationRequest",
    "DeclineInvitationResponse",
    "DeclineInvitationUseCase",
    "GetInvitationByTokenRequest",
    "GetInvitationByTokenResponse",
    "GetInvitationByTokenUseCase",
    "GetPendingInvitationsRequest",
    "GetPendingInvitationsResponse",
    "GetPendingInvitationsUseCase",
    "ListTourInvitationsRequest",
    "ListTourInvitationsResponse",
    "ListTourInvitationsUseCase",
    "ResendInvitationRequest",
    "ResendInvitationResponse",
    "ResendInvitationUseCase",
    "SendInvitationsRequest",
    "SendInvitationsResponse",
    "SendInvitationsUseCase",
    "VerifyInvitationOTPRequest",
    "VerifyInvitationOTPResponse",
    "VerifyInvitationOTPUseCase",
]
