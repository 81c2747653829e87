"""Tour use cases."""

from tour.application.usecase.tour.create_tour import (
    CreateTourRequest,
    CreateTourResponse,
    CreateTourUseCase,
)
from tour.application.usecase.tour.delete_tour import (
    DeleteTourRequest,
    DeleteTourUseCase,
)
from tour.application.usecase.tour.details import TourDetails
from tour.application.usecase.tour.get_tour import (
    GetTourRequest,
    GetTourResponse,
    GetTourUseCase,
)
from tour.application.usecase.tour.list_participants import (
    ListParticipantsRequest,
    ListParticipantsResponse,
    ListParticipantsUseCase,
    ParticipantItem,
)
from tour.application.usecase.tour.list_tours import (
    ListToursRequest,
    ListToursResponse,
    ListToursUseCase,
    TourListItem,
)
from tour.application.usecase.tour.mark_tour_viewed import (
    MarkTourViewedRequest,
    MarkTourViewedResponse,
    MarkTourViewedUseCase,
)
from tour.application.usecase.tour.remove_participant import (
    RemoveParticipantRequest,
    RemoveParticipantUseCase,
)
from tour.application.usecase.tour.set_voting_lock import (
    SetVotingLockRequest,
    SetVotingLockUseCase,
)
from tour.application.usecase.tour.update_tour import (
    UpdateTourRequest,
    UpdateTourUseCase,
)

__all__ = [
    "CreateTourRequest",
    "CreateTourResponse",
    "CreateTourUseCase",
    "DeleteTourRequest",
    "DeleteTourUseCase",
    "GetTourRequest",
    "GetTourResponse",
    "GetTourUseCase",
    "ListParticipantsRequest",
    "ListParticipantsResponse",
    "ListParticipantsUseCase",
    "ListToursRequest",
    "ListToursResponse",
    "ListToursUseCase",
    "MarkTourViewedRequest",
    "MarkTourViewedResponse",
    "MarkTourViewedUseCase",
    "ParticipantItem",
    "RemoveParticipantRequest",
    "RemoveParticipantUseCase",
    "SetVotingLockRequest",
    "SetVotingLockUseCase",
    "TourDetails",
    "TourListItem",
    "UpdateTourRequest",
    "UpdateTourUseCase",
]
