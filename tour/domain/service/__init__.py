"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .csrf_service import CSRFService
from .email_client import EmailClient, EmailResult, InvitationEmail
from .invitation_permissions import InvitationActions, InvitationPermissions
from .invitation_service import (
    InvitationSendError,
    InvitationService,
    SendInvitationsResult,
)
from .jwt_service import JWTService
from .rate_limit_service import (
    RateLimitConfigs,
    RateLimitService,
    current_time_ms,
    get_client_identifier,
    get_rate_limit_mode,
)
from .tag_service import TagService
from .tour_service import TourService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "CSRFService",
    "CommentService",
    "EmailClient",
    "EmailResult",
    "InvitationActions",
    "InvitationEmail",
    "InvitationPermissions",
    "InvitationSendError",
    "InvitationService",
    "JWTService",
    "RateLimitConfigs",
    "RateLimitService",
    "SendInvitationsResult",
    "Service",
    "TagService",
    "TourService",
    "UserService",
    "VoteService",
    "current_time_ms",
    "get_client_identifier",
    "get_rate_limit_mode",
]
