"""Repository interfaces for the tour planner domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from tour.domain.repository.comment import CommentRepository
from tour.domain.repository.invitation import InvitationRepository
from tour.domain.repository.invitation_otp import InvitationOTPRepository
from tour.domain.repository.participant import ParticipantRepository
from tour.domain.repository.rate_limit import RateLimitStore
from tour.domain.repository.tag import TagRepository
from tour.domain.repository.tour import TourRepository
from tour.domain.repository.tour_activity import TourActivityRepository
from tour.domain.repository.user import UserRepository
from tour.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "InvitationRepository",
    "InvitationOTPRepository",
    "ParticipantRepository",
    "RateLimitStore",
    "TagRepository",
    "TourActivityRepository",
    "TourRepository",
    "UserRepository",
    "VoteRepository",
]
