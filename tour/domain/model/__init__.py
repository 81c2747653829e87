"""Domain model entities for the tour planner."""

from tour.domain.model.comment import Comment
from tour.domain.model.invitation import Invitation
from tour.domain.model.invitation_otp import InvitationOTP
from tour.domain.model.participant import Participant
from tour.domain.model.tag import Tag
from tour.domain.model.tour import Tour
from tour.domain.model.tour_activity import TourActivity
from tour.domain.model.user import User
from tour.domain.model.vote import Vote

__all__ = [
    "User",
    "Tour",
    "Participant",
    "Invitation",
    "InvitationOTP",
    "Vote",
    "Comment",
    "Tag",
    "TourActivity",
]
