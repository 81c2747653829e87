"""Tag repository interface."""

from abc import ABC, abstractmethod

from tour.domain.model.tag import Tag
from tour.domain.value import TagId, TourId


class TagRepository(ABC):
    """Repository for tags and their assignment to tours."""

    @abstractmethod
    async def get_or_create(self, name: str) -> Tag:
        """Return the tag named ``name`` ignoring case, creating it if needed.

        Args:
            name: Trimmed tag name

        Returns:
            Existing or created tag
        """
        pass

    @abstractmethod
    async def search(self, prefix: str, limit: int = 10) -> list[Tag]:
        """Find tags whose name starts with ``prefix`` (case-insensitive),
        ordered by name. An empty prefix matches every tag."""
        pass

    @abstractmethod
    async def find_by_tour(self, tour_id: TourId) -> list[Tag]:
        """Return the tags of a tour, ordered by name."""
        pass

    @abstractmethod
    async def add_to_tour(self, tour_id: TourId, tag_id: TagId) -> None:
        """Attach a tag to a tour. Attaching it twice is a no-op."""
        pass

    @abstractmethod
    async def remove_from_tour(self, tour_id: TourId, tag_id: TagId) -> bool:
        """Detach a tag from a tour.

        Returns:
            True if detached, False if the tour did not have the tag
        """
        pass
