"""Unit tests for VoteService."""

import pytest

from tour.domain.error import BusinessRuleViolationError
from tour.domain.service import VoteService
from tour.domain.value import TourStatus
from tests.conftest import join_tour, save_user, seed_tour
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleVote:
    @pytest.mark.asyncio
    async def test_toggle_adds_then_removes(self, unit_env):
        service = await unit_env.get(VoteService)
        owner, tour = await seed_tour(unit_env)

        assert await service.toggle_vote(tour, owner.id) is True
        assert await service.get_voters(tour.id) == [owner.id]

        assert await service.toggle_vote(tour, owner.id) is False
        assert await service.get_voters(tour.id) == []

    @pytest.mark.asyncio
    async def test_one_vote_per_participant(self, unit_env):
        service = await unit_env.get(VoteService)
        owner, tour = await seed_tour(unit_env)
        member = await save_user(unit_env)
        await join_tour(unit_env, tour, member)

        await service.toggle_vote(tour, owner.id)
        await service.toggle_vote(tour, member.id)

        assert await service.get_voters(tour.id) == [owner.id, member.id]
        assert await service.has_voted(tour.id, member.id) is True

    @pytest.mark.asyncio
    async def test_locked_voting_rejects_both_directions(self, unit_env):
        service = await unit_env.get(VoteService)
        owner, tour = await seed_tour(unit_env)
        await service.toggle_vote(tour, owner.id)
        locked = tour.model_copy(update={"voting_locked": True})

        with pytest.raises(BusinessRuleViolationError, match="Voting is locked"):
            await service.toggle_vote(locked, owner.id)

        assert await service.get_voters(tour.id) == [owner.id]

    @pytest.mark.asyncio
    async def test_archived_tour_rejects_votes(self, unit_env):
        service = await unit_env.get(VoteService)
        owner, tour = await seed_tour(unit_env, TourStatus.ARCHIVED)

        with pytest.raises(BusinessRuleViolationError):
            await service.toggle_vote(tour, owner.id)

    @pytest.mark.asyncio
    async def test_withdraw_ignores_lock(self, unit_env):
        service = await unit_env.get(VoteService)
        owner, tour = await seed_tour(unit_env)
        await service.toggle_vote(tour, owner.id)

        assert await service.withdraw_vote(tour.id, owner.id) is True
        assert await service.withdraw_vote(tour.id, owner.id) is False
