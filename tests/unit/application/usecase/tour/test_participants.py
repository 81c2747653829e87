"""Unit tests for the participant use cases."""

import pytest

from tour.application.usecase.tour import (
    ListParticipantsRequest,
    ListParticipantsUseCase,
    RemoveParticipantRequest,
    RemoveParticipantUseCase,
)
from tour.domain.error import NotFoundError
from tour.domain.service import VoteService
from tests.conftest import join_tour, save_user, seed_tour
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListParticipants:
    @pytest.mark.asyncio
    async def test_owner_first_and_email_only_without_name(self, unit_env):
        # Arrange
        list_participants = await unit_env.get(ListParticipantsUseCase)
        owner, tour = await seed_tour(unit_env)
        member = await save_user(unit_env, "member@example.com")
        await join_tour(unit_env, tour, member)

        # Act
        response = await list_participants.execute(
            ListParticipantsRequest(tour_id=str(tour.id), user_id=str(member.id))
        )

        # Assert
        owner_item, member_item = response.data
        assert owner_item.user_id == str(owner.id)
        assert owner_item.is_owner is True
        assert owner_item.display_name == "Olivia"
        assert owner_item.email is None
        assert member_item.display_name is None
        assert member_item.email == "member@example.com"

    @pytest.mark.asyncio
    async def test_stranger_cannot_list(self, unit_env):
        list_participants = await unit_env.get(ListParticipantsUseCase)
        _, tour = await seed_tour(unit_env)
        stranger = await save_user(unit_env, "stranger@example.com")

        with pytest.raises(NotFoundError):
            await list_participants.execute(
                ListParticipantsRequest(tour_id=str(tour.id), user_id=str(stranger.id))
            )


class TestRemoveParticipant:
    @pytest.mark.asyncio
    async def test_leaving_takes_the_vote_along(self, unit_env):
        remove = await unit_env.get(RemoveParticipantUseCase)
        votes = await unit_env.get(VoteService)
        owner, tour = await seed_tour(unit_env)
        member = await save_user(unit_env)
        await join_tour(unit_env, tour, member)
        await votes.toggle_vote(tour, owner.id)
        await votes.toggle_vote(tour, member.id)

        await remove.execute(
            RemoveParticipantRequest(
                tour_id=str(tour.id),
                user_id=str(member.id),
                participant_id=str(member.id),
            )
        )

        assert await votes.get_voters(tour.id) == [owner.id]

    @pytest.mark.asyncio
    async def test_removed_participant_loses_access(self, unit_env):
        remove = await unit_env.get(RemoveParticipantUseCase)
        list_participants = await unit_env.get(ListParticipantsUseCase)
        owner, tour = await seed_tour(unit_env)
        member = await save_user(unit_env)
        await join_tour(unit_env, tour, member)

        await remove.execute(
            RemoveParticipantRequest(
                tour_id=str(tour.id),
                user_id=str(owner.id),
                participant_id=str(member.id),
            )
        )

        with pytest.raises(NotFoundError):
            await list_participants.execute(
                ListParticipantsRequest(tour_id=str(tour.id), user_id=str(member.id))
            )
