"""Integration tests for the PostgreSQL vote, comment, tag and activity repositories."""

import os
import secrets
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from tour.domain.model import Comment, Participant, TourActivity, Vote
from tour.domain.repository import (
    CommentRepository,
    ParticipantRepository,
    TagRepository,
    TourActivityRepository,
    TourRepository,
    UserRepository,
    VoteRepository,
)
from tour.domain.value import CommentId, TourStatus
from tests.conftest import make_tour, make_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.environ.get("DATABASE__URL"),
        reason="DATABASE__URL is not set",
    ),
]

integration_env = create_env_fixture(unmock={"persistence"})


def unique(prefix: str) -> str:
    return f"{prefix}-{secrets.token_hex(4)}"


async def seed(env, status: TourStatus = TourStatus.PLANNING):
    owner = await (await env.get(UserRepository)).save(
        make_user(f"{unique('owner')}@example.com")
    )
    tour = await (await env.get(TourRepository)).save(make_tour(owner, status))
    await (await env.get(ParticipantRepository)).save(
        Participant(tour_id=tour.id, user_id=owner.id, email=owner.email)
    )
    return owner, tour


class TestTourQueriesIntegration:
    @pytest.mark.asyncio
    async def test_membership_listing_and_cascade(self, integration_env):
        # Arrange
        tour_repo = await integration_env.get(TourRepository)
        participants = await integration_env.get(ParticipantRepository)
        votes = await integration_env.get(VoteRepository)
        owner, tour = await seed(integration_env)
        await votes.save(Vote(tour_id=tour.id, user_id=owner.id))

        # Act
        tour_ids = await participants.find_tour_ids_by_user(owner.id)
        active = await tour_repo.find_by_ids(tour_ids, archived=False)
        archived_total = await tour_repo.count_by_ids(tour_ids, archived=True)
        deleted = await tour_repo.delete(tour.id)

        # Assert
        assert [t.id for t in active] == [tour.id]
        assert archived_total == 0
        assert deleted is True
        assert await participants.find_tour_ids_by_user(owner.id) == []
        assert await votes.exists(tour.id, owner.id) is False

    @pytest.mark.asyncio
    async def test_empty_id_list(self, integration_env):
        tour_repo = await integration_env.get(TourRepository)

        assert await tour_repo.find_by_ids([], archived=False) == []
        assert await tour_repo.count_by_ids([], archived=False) == 0


class TestVoteAndCommentIntegration:
    @pytest.mark.asyncio
    async def test_votes_round_trip(self, integration_env):
        votes = await integration_env.get(VoteRepository)
        owner, tour = await seed(integration_env)

        await votes.save(Vote(tour_id=tour.id, user_id=owner.id))

        assert await votes.find_user_ids_by_tour(tour.id) == [owner.id]
        assert await votes.delete(tour.id, owner.id) is True
        assert await votes.delete(tour.id, owner.id) is False

    @pytest.mark.asyncio
    async def test_comments_update_and_page(self, integration_env):
        comments = await integration_env.get(CommentRepository)
        owner, tour = await seed(integration_env)
        start = datetime.now(timezone.utc)
        saved = []
        for i in range(3):
            saved.append(
                await comments.save(
                    Comment(
                        id=CommentId(uuid4()),
                        tour_id=tour.id,
                        user_id=owner.id,
                        content=f"comment {i}",
                        created_at=start + timedelta(seconds=i),
                        updated_at=start + timedelta(seconds=i),
                    )
                )
            )

        await comments.save(saved[0].model_copy(update={"content": "edited"}))

        page = await comments.find_by_tour(tour.id, limit=2, offset=0)
        assert [c.content for c in page] == ["edited", "comment 1"]
        assert await comments.count_by_tour(tour.id) == 3
        assert await comments.delete(saved[2].id) is True
        assert await comments.find_by_id(saved[2].id) is None


class TestTagAndActivityIntegration:
    @pytest.mark.asyncio
    async def test_get_or_create_ignores_case(self, integration_env):
        tags = await integration_env.get(TagRepository)
        _, tour = await seed(integration_env, TourStatus.ARCHIVED)
        name = unique("Hiking")

        first = await tags.get_or_create(name)
        again = await tags.get_or_create(name.lower())
        await tags.add_to_tour(tour.id, first.id)
        await tags.add_to_tour(tour.id, first.id)

        assert again.id == first.id
        assert again.name == name
        assert [t.id for t in await tags.find_by_tour(tour.id)] == [first.id]
        assert [t.id for t in await tags.search(name.upper())] == [first.id]
        assert await tags.remove_from_tour(tour.id, first.id) is True
        assert await tags.remove_from_tour(tour.id, first.id) is False

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, integration_env):
        tags = await integration_env.get(TagRepository)
        await tags.get_or_create(unique("plain"))

        # No tag name starts with a percent sign
        assert await tags.search("%") == []
        assert await tags.search("_") == []

    @pytest.mark.asyncio
    async def test_activity_upsert(self, integration_env):
        activity = await integration_env.get(TourActivityRepository)
        owner, tour = await seed(integration_env)
        first_view = datetime.now(timezone.utc) - timedelta(hours=1)

        await activity.save(
            TourActivity(tour_id=tour.id, user_id=owner.id, last_viewed_at=first_view)
        )
        latest = datetime.now(timezone.utc)
        await activity.save(
            TourActivity(tour_id=tour.id, user_id=owner.id, last_viewed_at=latest)
        )

        viewed = await activity.find_by_user(owner.id)
        assert viewed[tour.id].last_viewed_at == latest
