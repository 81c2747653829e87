"""Unit tests for the vote use cases."""

import pytest

from tour.application.usecase.tour import SetVotingLockRequest, SetVotingLockUseCase
from tour.application.usecase.vote import (
    GetVotesRequest,
    GetVotesUseCase,
    ToggleVoteRequest,
    ToggleVoteUseCase,
)
from tour.domain.error import BusinessRuleViolationError, NotFoundError
from tour.domain.repository import TourRepository
from tests.conftest import join_tour, save_user, seed_tour
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleVote:
    @pytest.mark.asyncio
    async def test_vote_then_unvote(self, unit_env):
        toggle = await unit_env.get(ToggleVoteUseCase)
        owner, tour = await seed_tour(unit_env)
        request = ToggleVoteRequest(tour_id=str(tour.id), user_id=str(owner.id))

        added = await toggle.execute(request)
        removed = await toggle.execute(request)

        assert (added.voted, added.message, added.vote_count) == (True, "Vote added", 1)
        assert (removed.voted, removed.message, removed.vote_count) == (
            False,
            "Vote removed",
            0,
        )

    @pytest.mark.asyncio
    async def test_vote_moves_updated_at(self, unit_env):
        toggle = await unit_env.get(ToggleVoteUseCase)
        owner, tour = await seed_tour(unit_env)

        await toggle.execute(ToggleVoteRequest(tour_id=str(tour.id), user_id=str(owner.id)))

        stored = await (await unit_env.get(TourRepository)).find_by_id(tour.id)
        assert stored.updated_at > tour.updated_at

    @pytest.mark.asyncio
    async def test_locked_voting(self, unit_env):
        toggle = await unit_env.get(ToggleVoteUseCase)
        set_lock = await unit_env.get(SetVotingLockUseCase)
        owner, tour = await seed_tour(unit_env)
        member = await save_user(unit_env)
        await join_tour(unit_env, tour, member)
        await set_lock.execute(
            SetVotingLockRequest(tour_id=str(tour.id), user_id=str(owner.id), locked=True)
        )

        with pytest.raises(BusinessRuleViolationError, match="Voting is locked"):
            await toggle.execute(
                ToggleVoteRequest(tour_id=str(tour.id), user_id=str(member.id))
            )

    @pytest.mark.asyncio
    async def test_stranger_cannot_vote(self, unit_env):
        toggle = await unit_env.get(ToggleVoteUseCase)
        _, tour = await seed_tour(unit_env)
        stranger = await save_user(unit_env, "stranger@example.com")

        with pytest.raises(NotFoundError):
            await toggle.execute(
                ToggleVoteRequest(tour_id=str(tour.id), user_id=str(stranger.id))
            )


class TestGetVotes:
    @pytest.mark.asyncio
    async def test_voters_by_display_name_or_email(self, unit_env):
        toggle = await unit_env.get(ToggleVoteUseCase)
        get_votes = await unit_env.get(GetVotesUseCase)
        owner, tour = await seed_tour(unit_env)
        member = await save_user(unit_env, "member@example.com")
        await join_tour(unit_env, tour, member)
        for voter in (owner, member):
            await toggle.execute(
                ToggleVoteRequest(tour_id=str(tour.id), user_id=str(voter.id))
            )

        response = await get_votes.execute(
            GetVotesRequest(tour_id=str(tour.id), user_id=str(member.id))
        )

        assert response.vote_count == 2
        assert response.has_voted is True
        assert response.voting_locked is False
        assert [v.display_name for v in response.voters] == [
            "Olivia",
            "member@example.com",
        ]
