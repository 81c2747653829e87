"""Unit tests for TourService."""

from datetime import date, timedelta

import pytest

from tour.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from tour.domain.repository import ParticipantRepository, TourRepository
from tour.domain.service import TourService
from tour.domain.value import TourStatus
from tests.conftest import join_tour, make_tour, save_user, seed_tour
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestVisibility:
    """Tests for get_for_participant and ensure_owner."""

    @pytest.mark.asyncio
    async def test_participant_sees_tour(self, unit_env):
        service = await unit_env.get(TourService)
        owner, tour = await seed_tour(unit_env)

        assert (await service.get_for_participant(tour.id, owner.id)).id == tour.id

    @pytest.mark.asyncio
    async def test_stranger_gets_not_found(self, unit_env):
        service = await unit_env.get(TourService)
        _, tour = await seed_tour(unit_env)
        stranger = await save_user(unit_env, "stranger@example.com")

        with pytest.raises(NotFoundError):
            await service.get_for_participant(tour.id, stranger.id)

    @pytest.mark.asyncio
    async def test_member_is_not_owner(self, unit_env):
        service = await unit_env.get(TourService)
        _, tour = await seed_tour(unit_env)
        member = await save_user(unit_env)
        await join_tour(unit_env, tour, member)

        with pytest.raises(NotAuthorizedError):
            service.ensure_owner(tour, member.id, "edit")


class TestListForUser:
    """Tests for list_for_user and find_new_activity."""

    @pytest.mark.asyncio
    async def test_splits_active_and_archived(self, unit_env):
        # Arrange
        service = await unit_env.get(TourService)
        tour_repo = await unit_env.get(TourRepository)
        owner, active = await seed_tour(unit_env)
        archived = await tour_repo.save(make_tour(owner, TourStatus.ARCHIVED))
        await join_tour(unit_env, archived, owner)
        other_owner = await save_user(unit_env, "someone@example.com")
        await tour_repo.save(make_tour(other_owner))

        # Act
        active_tours, active_total = await service.list_for_user(owner.id, archived=False)
        archived_tours, archived_total = await service.list_for_user(
            owner.id, archived=True
        )

        # Assert
        assert [t.id for t in active_tours] == [active.id]
        assert active_total == 1
        assert [t.id for t in archived_tours] == [archived.id]
        assert archived_total == 1

    @pytest.mark.asyncio
    async def test_pages_by_start_date(self, unit_env):
        service = await unit_env.get(TourService)
        tour_repo = await unit_env.get(TourRepository)
        owner = await save_user(unit_env, "owner@example.com")
        for offset in (20, 0, 10):
            tour = make_tour(owner).model_copy(
                update={
                    "start_date": date(2026, 7, 1) + timedelta(days=offset),
                    "end_date": date(2026, 7, 2) + timedelta(days=offset),
                }
            )
            await tour_repo.save(tour)
            await join_tour(unit_env, tour, owner)

        first, total = await service.list_for_user(owner.id, False, page=1, limit=2)
        second, _ = await service.list_for_user(owner.id, False, page=2, limit=2)

        assert total == 3
        assert [t.start_date.day for t in first] == [1, 11]
        assert [t.start_date.day for t in second] == [21]

    @pytest.mark.asyncio
    async def test_new_activity_until_viewed(self, unit_env):
        service = await unit_env.get(TourService)
        owner, tour = await seed_tour(unit_env)

        assert await service.find_new_activity([tour], owner.id) == {tour.id}

        await service.mark_viewed(tour, owner.id)
        assert await service.find_new_activity([tour], owner.id) == set()

        touched = await service.touch(tour)
        assert await service.find_new_activity([touched], owner.id) == {tour.id}


class TestUpdateTour:
    """Tests for update_tour and set_voting_locked."""

    @pytest.mark.asyncio
    async def test_applies_partial_changes(self, unit_env):
        service = await unit_env.get(TourService)
        _, tour = await seed_tour(unit_env)

        updated = await service.update_tour(
            tour, {"title": "Dolomites Week", "description": None}
        )

        assert updated.title == "Dolomites Week"
        assert updated.destination == tour.destination
        assert updated.updated_at > tour.updated_at
        stored = await (await unit_env.get(TourRepository)).find_by_id(tour.id)
        assert stored.title == "Dolomites Week"

    @pytest.mark.asyncio
    async def test_inverted_dates_are_rejected(self, unit_env):
        service = await unit_env.get(TourService)
        _, tour = await seed_tour(unit_env)

        with pytest.raises(ValidationError):
            await service.update_tour(tour, {"end_date": date(2026, 6, 1)})

    @pytest.mark.asyncio
    async def test_archived_tour_is_read_only(self, unit_env):
        service = await unit_env.get(TourService)
        _, tour = await seed_tour(unit_env, TourStatus.ARCHIVED)

        with pytest.raises(BusinessRuleViolationError):
            await service.update_tour(tour, {"title": "Renamed"})
        with pytest.raises(BusinessRuleViolationError):
            await service.set_voting_locked(tour, True)

    @pytest.mark.asyncio
    async def test_locking_voting(self, unit_env):
        service = await unit_env.get(TourService)
        _, tour = await seed_tour(unit_env)

        locked = await service.set_voting_locked(tour, True)

        assert locked.voting_locked is True
        stored = await (await unit_env.get(TourRepository)).find_by_id(tour.id)
        assert stored.voting_locked is True


class TestRemoveParticipant:
    """Tests for remove_participant."""

    @pytest.mark.asyncio
    async def test_participant_can_leave(self, unit_env):
        service = await unit_env.get(TourService)
        participants = await unit_env.get(ParticipantRepository)
        _, tour = await seed_tour(unit_env)
        member = await save_user(unit_env)
        await join_tour(unit_env, tour, member)

        await service.remove_participant(tour, member.id, requested_by=member.id)

        assert not await participants.exists(tour.id, member.id)

    @pytest.mark.asyncio
    async def test_owner_can_remove_others(self, unit_env):
        service = await unit_env.get(TourService)
        owner, tour = await seed_tour(unit_env)
        member = await save_user(unit_env)
        await join_tour(unit_env, tour, member)

        await service.remove_participant(tour, member.id, requested_by=owner.id)

        assert not await service.is_participant(tour.id, member.id)

    @pytest.mark.asyncio
    async def test_owner_cannot_leave(self, unit_env):
        service = await unit_env.get(TourService)
        owner, tour = await seed_tour(unit_env)

        with pytest.raises(BusinessRuleViolationError, match="Delete the tour"):
            await service.remove_participant(tour, owner.id, requested_by=owner.id)

    @pytest.mark.asyncio
    async def test_member_cannot_remove_others(self, unit_env):
        service = await unit_env.get(TourService)
        _, tour = await seed_tour(unit_env)
        alice = await save_user(unit_env, "alice@example.com")
        bob = await save_user(unit_env, "bob@example.com")
        await join_tour(unit_env, tour, alice)
        await join_tour(unit_env, tour, bob)

        with pytest.raises(NotAuthorizedError):
            await service.remove_participant(tour, bob.id, requested_by=alice.id)

    @pytest.mark.asyncio
    async def test_unknown_participant(self, unit_env):
        service = await unit_env.get(TourService)
        owner, tour = await seed_tour(unit_env)
        stranger = await save_user(unit_env, "stranger@example.com")

        with pytest.raises(NotFoundError):
            await service.remove_participant(tour, stranger.id, requested_by=owner.id)
