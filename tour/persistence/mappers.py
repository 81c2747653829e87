"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from tour.domain.model import (
    Comment,
    Invitation,
    InvitationOTP,
    Participant,
    Tag,
    Tour,
    TourActivity,
    User,
    Vote,
)
from tour.domain.value import (
    CommentId,
    Email,
    InvitationId,
    InvitationOTPId,
    InvitationStatus,
    InvitationToken,
    OTPToken,
    TagId,
    TourId,
    TourStatus,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        display_name=row.get("display_name"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_tour(row: Dict[str, Any]) -> Tour:
    """Convert database row to Tour domain model."""
    return Tour(
        id=TourId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        title=row["title"],
        destination=row.get("destination"),
        description=row.get("description"),
        start_date=row["start_date"],
        end_date=row["end_date"],
        status=TourStatus(row["status"]),
        voting_locked=row["voting_locked"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tour_to_dict(tour: Tour) -> Dict[str, Any]:
    """Convert Tour domain model to database dict."""
    data = tour.model_dump()
    data["status"] = tour.status.value
    return data


def row_to_participant(row: Dict[str, Any]) -> Participant:
    """Convert database row to Participant domain model."""
    return Participant(
        tour_id=TourId(_uuid(row["tour_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        email=Email(row["email"]),
        joined_at=row["joined_at"],
    )


def participant_to_dict(participant: Participant) -> Dict[str, Any]:
    """Convert Participant domain model to database dict."""
    return participant.model_dump()


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        tour_id=TourId(_uuid(row["tour_id"])),
        inviter_id=UserId(_uuid(row["inviter_id"])),
        email=Email(row["email"]),
        status=InvitationStatus(row["status"]),
        token=InvitationToken(row["token"]),
        expires_at=row["expires_at"],
        created_at=row["created_at"],
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    Root value objects (email, token) dump to their primitive values.
    """
    data = invitation.model_dump()
    data["status"] = invitation.status.value
    return data


def row_to_invitation_otp(row: Dict[str, Any]) -> InvitationOTP:
    """Convert database row to InvitationOTP domain model."""
    return InvitationOTP(
        id=InvitationOTPId(_uuid(row["id"])),
        email=Email(row["email"]),
        otp_token=OTPToken(row["otp_token"]),
        invitation_token=InvitationToken(row["invitation_token"]),
        expires_at=row["expires_at"],
        used=row["used"],
        created_at=row["created_at"],
    )


def invitation_otp_to_dict(otp: InvitationOTP) -> Dict[str, Any]:
    """Convert InvitationOTP domain model to database dict."""
    return otp.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    return Vote(
        tour_id=TourId(_uuid(row["tour_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    return vote.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        tour_id=TourId(_uuid(row["tour_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    return Tag(id=TagId(row["id"]), name=row["name"])


def row_to_tour_activity(row: Dict[str, Any]) -> TourActivity:
    return TourActivity(
        tour_id=TourId(_uuid(row["tour_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        last_viewed_at=row["last_viewed_at"],
    )


def tour_activity_to_dict(activity: TourActivity) -> Dict[str, Any]:
    return activity.model_dump()
