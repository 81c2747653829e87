"""In-memory repository implementations.

Repositories back the test container; the rate limit store is also the
production store for single-instance deployments.
"""

from .comment import InMemoryCommentRepository
from .invitation import InMemoryInvitationRepository
from .invitation_otp import InMemoryInvitationOTPRepository
from .participant import InMemoryParticipantRepository
from .rate_limit import InMemoryRateLimitStore
from .tag import InMemoryTagRepository
from .tour import InMemoryTourRepository
from .tour_activity import InMemoryTourActivityRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryInvitationRepository",
    "InMemoryInvitationOTPRepository",
    "InMemoryParticipantRepository",
    "InMemoryRateLimitStore",
    "InMemoryTagRepository",
    "InMemoryTourActivityRepository",
    "InMemoryTourRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
