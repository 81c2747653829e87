"""In-memory tag repository for testing."""

from tour.domain.model.tag import Tag
from tour.domain.repository.tag import TagRepository
from tour.domain.value import TagId, TourId


class InMemoryTagRepository(TagRepository):
    """Tags keyed by lowercased name with serial IDs, like the ``tags`` table."""

    def __init__(self) -> None:
        self._tags: dict[str, Tag] = {}
        self._tour_tags: set[tuple[TourId, TagId]] = set()

    async def get_or_create(self, name: str) -> Tag:
        key = name.lower()
        if key not in self._tags:
            self._tags[key] = Tag(id=TagId(len(self._tags) + 1), name=name)
        return self._tags[key]

    async def search(self, prefix: str, limit: int = 10) -> list[Tag]:
        lowered = prefix.lower()
        matches = [t for key, t in self._tags.items() if key.startswith(lowered)]
        matches.sort(key=lambda t: t.name)
        return matches[:limit]

    async def find_by_tour(self, tour_id: TourId) -> list[Tag]:
        tag_ids = {tag_id for tid, tag_id in self._tour_tags if tid == tour_id}
        matches = [t for t in self._tags.values() if t.id in tag_ids]
        matches.sort(key=lambda t: t.name)
        return matches

    async def add_to_tour(self, tour_id: TourId, tag_id: TagId) -> None:
        self._tour_tags.add((tour_id, tag_id))

    async def remove_from_tour(self, tour_id: TourId, tag_id: TagId) -> bool:
        if (tour_id, tag_id) not in self._tour_tags:
            return False
        self._tour_tags.discard((tour_id, tag_id))
        return True
