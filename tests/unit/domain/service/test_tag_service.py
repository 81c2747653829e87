"""Unit tests for TagService."""

import pytest

from tour.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from tour.domain.service import TagService
from tour.domain.value import TagId, TourStatus
from tests.conftest import seed_tour
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestTourTags:
    @pytest.mark.asyncio
    async def test_active_tour_cannot_be_tagged(self, unit_env):
        service = await unit_env.get(TagService)
        _, tour = await seed_tour(unit_env)

        with pytest.raises(BusinessRuleViolationError, match="archived tours"):
            await service.add_tag(tour, "hiking")

    @pytest.mark.asyncio
    async def test_names_are_trimmed_and_shared_ignoring_case(self, unit_env):
        service = await unit_env.get(TagService)
        _, tour = await seed_tour(unit_env, TourStatus.ARCHIVED)

        first = await service.add_tag(tour, "  Hiking ")
        again = await service.add_tag(tour, "hiking")

        assert first.name == "Hiking"
        assert again.id == first.id
        assert [t.name for t in await service.list_tour_tags(tour.id)] == ["Hiking"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["   ", "x" * 51])
    async def test_invalid_names(self, unit_env, name):
        service = await unit_env.get(TagService)
        _, tour = await seed_tour(unit_env, TourStatus.ARCHIVED)

        with pytest.raises(ValidationError):
            await service.add_tag(tour, name)

    @pytest.mark.asyncio
    async def test_remove(self, unit_env):
        service = await unit_env.get(TagService)
        _, tour = await seed_tour(unit_env, TourStatus.ARCHIVED)
        tag = await service.add_tag(tour, "alps")

        await service.remove_tag(tour, tag.id)

        assert await service.list_tour_tags(tour.id) == []
        with pytest.raises(NotFoundError):
            await service.remove_tag(tour, tag.id)
        with pytest.raises(NotFoundError):
            await service.remove_tag(tour, TagId(999))


class TestSearch:
    @pytest.mark.asyncio
    async def test_prefix_search_ignores_case(self, unit_env):
        service = await unit_env.get(TagService)
        _, tour = await seed_tour(unit_env, TourStatus.ARCHIVED)
        for name in ("Hiking", "hut", "Alps"):
            await service.add_tag(tour, name)

        assert [t.name for t in await service.search("H")] == ["Hiking", "hut"]
        assert [t.name for t in await service.search("")] == ["Alps", "Hiking", "hut"]
        assert [t.name for t in await service.search("", limit=1)] == ["Alps"]
