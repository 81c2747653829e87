"""Tour domain service."""

from datetime import date, datetime, timezone
from typing import Any
from uuid import uuid4

import logfire

from tour.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from tour.domain.model import Participant, Tour, TourActivity, User
from tour.domain.repository import (
    ParticipantRepository,
    TourActivityRepository,
    TourRepository,
)
from tour.domain.value import TourId, UserId

from .base import Service

EDITABLE_FIELDS = frozenset(
    {"title", "destination", "description", "start_date", "end_date", "status"}
)


class TourService(Service):
    """Domain service for tours, their participants and view tracking."""

    def __init__(
        self,
        tour_repository: TourRepository,
        participant_repository: ParticipantRepository,
        activity_repository: TourActivityRepository,
    ) -> None:
        """Initialize tour service.

        Args:
            tour_repository: Tour repository
            participant_repository: Participant repository
            activity_repository: Tour view timestamps
        """
        self.tour_repository = tour_repository
        self.participant_repository = participant_repository
        self.activity_repository = activity_repository

    async def get_by_id(self, tour_id: TourId) -> Tour:
        """Get tour by ID.

        Raises:
            NotFoundError: If tour not found
        """
        with logfire.span("tour_service.get_by_id", tour_id=str(tour_id)):
            tour = await self.tour_repository.find_by_id(tour_id)
            if not tour:
                logfire.warn("Tour not found", tour_id=str(tour_id))
                raise NotFoundError("Tour", str(tour_id))
            return tour

    async def get_for_participant(self, tour_id: TourId, user_id: UserId) -> Tour:
        """Get a tour the user participates in.

        Tours are invisible to everyone else, so a stranger gets the same
        error as for a tour that does not exist.

        Raises:
            NotFoundError: If the tour does not exist or the user is not a
                participant
        """
        tour = await self.get_by_id(tour_id)
        if not await self.participant_repository.exists(tour_id, user_id):
            logfire.warn(
                "Tour requested by non-participant",
                tour_id=str(tour_id),
                user_id=str(user_id),
            )
            raise NotFoundError("Tour", str(tour_id))
        return tour

    def ensure_not_archived(self, tour: Tour) -> None:
        """Reject changes to an archived tour.

        Raises:
            BusinessRuleViolationError: If the tour is archived
        """
        if tour.is_archived:
            raise BusinessRuleViolationError(
                "Cannot modify an archived tour. Archived tours are read-only."
            )

    def ensure_owner(self, tour: Tour, user_id: UserId, action: str) -> None:
        """Raises NotAuthorizedError unless ``user_id`` owns the tour."""
        if not self.is_owner(tour, user_id):
            raise NotAuthorizedError(action, "tour", str(tour.id), str(user_id))

    def is_owner(self, tour: Tour, user_id: UserId) -> bool:
        return tour.owner_id == user_id

    async def is_participant(self, tour_id: TourId, user_id: UserId) -> bool:
        return await self.participant_repository.exists(tour_id, user_id)

    async def list_for_user(
        self, user_id: UserId, archived: bool, page: int = 1, limit: int = 20
    ) -> tuple[list[Tour], int]:
        """List the tours a user participates in.

        Args:
            user_id: Participant
            archived: True for archived tours, False for active ones
            page: 1-indexed page number
            limit: Page size

        Returns:
            Tuple of (tours on the page, total count)
        """
        with logfire.span(
            "tour_service.list_for_user",
            user_id=str(user_id),
            archived=archived,
            page=page,
        ):
            tour_ids = await self.participant_repository.find_tour_ids_by_user(user_id)
            tours = await self.tour_repository.find_by_ids(
                tour_ids, archived, limit=limit, offset=(page - 1) * limit
            )
            total = await self.tour_repository.count_by_ids(tour_ids, archived)
            return tours, total

    async def add_participant(self, tour: Tour, user: User) -> Participant:
        """Add a user to a tour.

        Args:
            tour: Tour to join
            user: Joining user

        Returns:
            Created participant

        Raises:
            BusinessRuleViolationError: If the user already participates
        """
        with logfire.span(
            "tour_service.add_participant",
            tour_id=str(tour.id),
            user_id=str(user.id),
        ):
            if await self.participant_repository.exists(tour.id, user.id):
                raise BusinessRuleViolationError(
                    "You are already a participant of this tour"
                )

            participant = await self.participant_repository.save(
                Participant(tour_id=tour.id, user_id=user.id, email=user.email)
            )
            logfire.info(
                "Participant added", tour_id=str(tour.id), user_id=str(user.id)
            )
            return participant

    async def list_participants(self, tour_id: TourId) -> list[Participant]:
        return await self.participant_repository.find_by_tour(tour_id)

    async def remove_participant(
        self, tour: Tour, user_id: UserId, requested_by: UserId
    ) -> None:
        """Remove a participant, or let a participant leave.

        Args:
            tour: Tour to leave
            user_id: Participant to remove
            requested_by: The participant themselves or the tour owner

        Raises:
            BusinessRuleViolationError: If ``user_id`` is the owner
            NotAuthorizedError: If the requester is neither the participant
                nor the owner
            NotFoundError: If ``user_id`` does not participate
        """
        with logfire.span(
            "tour_service.remove_participant",
            tour_id=str(tour.id),
            user_id=str(user_id),
            requested_by=str(requested_by),
        ):
            if self.is_owner(tour, user_id):
                raise BusinessRuleViolationError(
                    "The tour owner cannot leave the tour. Delete the tour instead."
                )
            if requested_by != user_id and not self.is_owner(tour, requested_by):
                raise NotAuthorizedError(
                    "remove participants of", "tour", str(tour.id), str(requested_by)
                )

            if not await self.participant_repository.delete(tour.id, user_id):
                raise NotFoundError("Participant", str(user_id))
            logfire.info(
                "Participant removed",
                tour_id=str(tour.id),
                user_id=str(user_id),
                left=requested_by == user_id,
            )

    async def create_tour(
        self,
        owner: User,
        title: str,
        start_date: date,
        end_date: date,
        destination: str | None = None,
        description: str | None = None,
    ) -> Tour:
        """Create a tour owned by ``owner``.

        The owner becomes the first participant.

        Args:
            owner: Creating user
            title: Tour title
            start_date: First day of the trip
            end_date: Last day of the trip
            destination: Optional destination
            description: Optional description

        Returns:
            Created tour

        Raises:
            ValueError: If the title or date range is invalid
        """
        with logfire.span("tour_service.create_tour", owner_id=str(owner.id)):
            tour = Tour(
                id=TourId(uuid4()),
                owner_id=owner.id,
                title=title,
                destination=destination,
                description=description,
                start_date=start_date,
                end_date=end_date,
            )
            saved = await self.tour_repository.save(tour)
            await self.participant_repository.save(
                Participant(tour_id=saved.id, user_id=owner.id, email=owner.email)
            )
            logfire.info("Tour created", tour_id=str(saved.id), owner_id=str(owner.id))
            return saved

    async def update_tour(self, tour: Tour, changes: dict[str, Any]) -> Tour:
        """Apply the owner's edits.

        Only fields present in ``changes`` are touched. Setting ``status``
        to archived is allowed and makes the tour read-only from then on.

        Args:
            tour: Tour to edit
            changes: New values by field name

        Returns:
            Updated tour

        Raises:
            BusinessRuleViolationError: If the tour is archived
            ValidationError: If a field is not editable or the resulting
                date range is inverted
        """
        with logfire.span(
            "tour_service.update_tour",
            tour_id=str(tour.id),
            fields=sorted(changes),
        ):
            self.ensure_not_archived(tour)

            unknown = set(changes) - EDITABLE_FIELDS
            if unknown:
                raise ValidationError(f"Fields cannot be edited: {sorted(unknown)}")

            start_date = changes.get("start_date", tour.start_date)
            end_date = changes.get("end_date", tour.end_date)
            if end_date < start_date:
                raise ValidationError("End date must be on or after start date")

            updated = Tour.model_validate(
                {
                    **tour.model_dump(),
                    **changes,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            await self.tour_repository.save(updated)
            logfire.info("Tour updated", tour_id=str(tour.id))
            return updated

    async def delete_tour(self, tour: Tour) -> None:
        """Delete a tour together with everything attached to it."""
        with logfire.span("tour_service.delete_tour", tour_id=str(tour.id)):
            await self.tour_repository.delete(tour.id)
            logfire.info("Tour deleted", tour_id=str(tour.id))

    async def set_voting_locked(self, tour: Tour, locked: bool) -> Tour:
        """Lock or unlock voting.

        Raises:
            BusinessRuleViolationError: If the tour is archived
        """
        with logfire.span(
            "tour_service.set_voting_locked", tour_id=str(tour.id), locked=locked
        ):
            self.ensure_not_archived(tour)
            if tour.voting_locked == locked:
                return tour

            updated = tour.model_copy(
                update={
                    "voting_locked": locked,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            await self.tour_repository.save(updated)
            logfire.info("Voting lock changed", tour_id=str(tour.id), locked=locked)
            return updated

    async def touch(self, tour: Tour) -> Tour:
        """Record new activity (a vote or comment) on the tour."""
        updated = tour.model_copy(update={"updated_at": datetime.now(timezone.utc)})
        return await self.tour_repository.save(updated)

    async def mark_viewed(self, tour: Tour, user_id: UserId) -> TourActivity:
        """Remember that the user has seen the tour's current state."""
        activity = TourActivity(
            tour_id=tour.id,
            user_id=user_id,
            last_viewed_at=datetime.now(timezone.utc),
        )
        return await self.activity_repository.save(activity)

    async def find_new_activity(
        self, tours: list[Tour], user_id: UserId
    ) -> set[TourId]:
        """Tours changed since the user last opened them.

        A tour the user has never opened counts as changed.
        """
        viewed = await self.activity_repository.find_by_user(user_id)
        return {
            tour.id
            for tour in tours
            if tour.id not in viewed
            or tour.updated_at > viewed[tour.id].last_viewed_at
        }
