"""Test configuration and fixtures."""

import os
import secrets
from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

# Tests run with production rate limits and never hit a real email provider
os.environ.setdefault("ENVIRONMENT", "test")

from tour.domain.model import Invitation, Participant, Tour, User  # noqa: E402
from tour.domain.repository import (  # noqa: E402
    ParticipantRepository,
    TourRepository,
    UserRepository,
)
from tour.domain.value import (  # noqa: E402
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    TourId,
    TourStatus,
    UserId,
)


def make_user(email: str = "owner@example.com", display_name: str | None = None) -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), email=Email(email), display_name=display_name)


def make_tour(owner: User, status: TourStatus = TourStatus.PLANNING) -> Tour:
    """Build a week-long tour owned by ``owner``."""
    return Tour(
        id=TourId(uuid4()),
        owner_id=owner.id,
        title="Alps Hiking Week",
        destination="Chamonix",
        start_date=date(2026, 7, 1),
        end_date=date(2026, 7, 8),
        status=status,
    )


def make_invitation(
    tour: Tour,
    email: str = "guest@example.com",
    status: InvitationStatus = InvitationStatus.PENDING,
    expires_at: datetime | None = None,
) -> Invitation:
    """Build an invitation to ``tour``; valid for a week unless overridden."""
    return Invitation(
        id=InvitationId(uuid4()),
        tour_id=tour.id,
        inviter_id=tour.owner_id,
        email=Email(email),
        status=status,
        token=InvitationToken(secrets.token_hex(16)),
        expires_at=expires_at or datetime.now(timezone.utc) + timedelta(days=7),
    )


async def seed_tour(env, status: TourStatus = TourStatus.PLANNING) -> tuple[User, Tour]:
    """Save an owner (display name "Olivia") and a tour they participate in.

    Args:
        env: Request-scoped test container
        status: Tour status

    Returns:
        Tuple of (owner, tour)
    """
    owner = await (await env.get(UserRepository)).save(
        make_user("owner@example.com", display_name="Olivia")
    )
    tour = await (await env.get(TourRepository)).save(make_tour(owner, status))
    await (await env.get(ParticipantRepository)).save(
        Participant(tour_id=tour.id, user_id=owner.id, email=owner.email)
    )
    return owner, tour


async def save_user(
    env, email: str = "member@example.com", display_name: str | None = None
) -> User:
    """Store a user with a fresh ID."""
    return await (await env.get(UserRepository)).save(make_user(email, display_name))


async def join_tour(env, tour: Tour, user: User) -> Participant:
    """Make ``user`` a participant of ``tour``."""
    return await (await env.get(ParticipantRepository)).save(
        Participant(tour_id=tour.id, user_id=user.id, email=user.email)
    )
