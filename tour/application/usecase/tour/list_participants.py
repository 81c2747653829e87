"""List participants use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from tour.application.usecase.base import BaseUseCase
from tour.domain.service import TourService, UserService
from tour.domain.value import TourId, UserId


class ListParticipantsRequest(BaseModel):
    """Request for a tour's participants."""

    tour_id: str
    user_id: str


class ParticipantItem(BaseModel):
    """Participant as seen by the other participants.

    The email address is only shared when the user has no display name.
    """

    user_id: str
    display_name: str | None
    email: str | None
    is_owner: bool
    joined_at: datetime


class ListParticipantsResponse(BaseModel):
    """Owner first, then by join date."""

    data: list[ParticipantItem]


class ListParticipantsUseCase(BaseUseCase):
    """Use case for listing who is on a tour."""

    def __init__(self, tour_service: TourService, user_service: UserService) -> None:
        self.tour_service = tour_service
        self.user_service = user_service

    async def execute(self, request: ListParticipantsRequest) -> ListParticipantsResponse:
        """Execute list participants use case.

        Raises:
            NotFoundError: If the tour does not exist or the caller is not
                a participant
        """
        tour_id = TourId(UUID(request.tour_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "list_participants", tour_id=str(tour_id), user_id=str(user_id)
        ):
            tour = await self.tour_service.get_for_participant(tour_id, user_id)
            participants = await self.tour_service.list_participants(tour_id)
            users = await self.user_service.get_many([p.user_id for p in participants])

            items = []
            for participant in participants:
                user = users.get(participant.user_id)
                display_name = user.display_name if user else None
                items.append(
                    ParticipantItem(
                        user_id=str(participant.user_id),
                        display_name=display_name,
                        email=None if display_name else participant.email.root,
                        is_owner=participant.user_id == tour.owner_id,
                        joined_at=participant.joined_at,
                    )
                )
            items.sort(key=lambda item: (not item.is_owner, item.joined_at))
            return ListParticipantsResponse(data=items)
