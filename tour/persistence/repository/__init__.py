"""PostgreSQL repository implementations."""

from tour.persistence.repository.comment import PostgresCommentRepository
from tour.persistence.repository.invitation import PostgresInvitationRepository
from tour.persistence.repository.invitation_otp import PostgresInvitationOTPRepository
from tour.persistence.repository.participant import PostgresParticipantRepository
from tour.persistence.repository.tag import PostgresTagRepository
from tour.persistence.repository.tour import PostgresTourRepository
from tour.persistence.repository.tour_activity import PostgresTourActivityRepository
from tour.persistence.repository.user import PostgresUserRepository
from tour.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresInvitationRepository",
    "PostgresInvitationOTPRepository",
    "PostgresParticipantRepository",
    "PostgresTagRepository",
    "PostgresTourActivityRepository",
    "PostgresTourRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
