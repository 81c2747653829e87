"""Vote use cases."""

from tour.application.usecase.vote.get_votes import (
    GetVotesRequest,
    GetVotesResponse,
    GetVotesUseCase,
)
from tour.application.usecase.vote.toggle_vote import (
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)

__all__ = [
    "GetVotesRequest",
    "GetVotesResponse",
    "GetVotesUseCase",
    "ToggleVoteRequest",
    "ToggleVoteResponse",
    "ToggleVoteUseCase",
]
