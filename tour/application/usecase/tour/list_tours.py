"""List tours use case."""

from typing import Literal
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tour.application.usecase.base import BaseUseCase
from tour.application.usecase.common import Pagination
from tour.application.usecase.tour.details import TourDetails
from tour.domain.service import TourService
from tour.domain.value import UserId


class ListToursRequest(BaseModel):
    """Request for one page of the caller's tours."""

    user_id: str
    status: Literal["active", "archived"] = "active"
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class TourListItem(TourDetails):
    """Tour in the caller's list."""

    has_new_activity: bool


class ListToursResponse(BaseModel):
    """One page of tours, earliest start date first."""

    data: list[TourListItem]
    pagination: Pagination


class ListToursUseCase(BaseUseCase):
    """Use case for listing the tours the caller participates in.

    "active" covers every status except archived.
    """

    def __init__(self, tour_service: TourService) -> None:
        self.tour_service = tour_service

    async def execute(self, request: ListToursRequest) -> ListToursResponse:
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "list_tours", user_id=str(user_id), status=request.status, page=request.page
        ):
            tours, total = await self.tour_service.list_for_user(
                user_id,
                archived=request.status == "archived",
                page=request.page,
                limit=request.limit,
            )
            changed = await self.tour_service.find_new_activity(tours, user_id)

            return ListToursResponse(
                data=[
                    TourListItem(
                        **TourDetails.from_tour(tour, user_id).model_dump(),
                        has_new_activity=tour.id in changed,
                    )
                    for tour in tours
                ],
                pagination=Pagination(
                    page=request.page, limit=request.limit, total=total
                ),
            )
