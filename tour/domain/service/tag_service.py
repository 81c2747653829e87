"""Tag domain service."""

import logfire

from tour.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from tour.domain.model import Tag, Tour
from tour.domain.model.tag import MAX_TAG_LENGTH
from tour.domain.repository import TagRepository
from tour.domain.value import TagId, TourId

from .base import Service


class TagService(Service):
    """Tags label finished trips, so they only change on archived tours."""

    def __init__(self, tag_repository: TagRepository) -> None:
        self.tag_repository = tag_repository

    def _ensure_archived(self, tour: Tour) -> None:
        if not tour.is_archived:
            raise BusinessRuleViolationError(
                "Tags can only be added to archived tours."
            )

    async def list_tour_tags(self, tour_id: TourId) -> list[Tag]:
        return await self.tag_repository.find_by_tour(tour_id)

    async def search(self, prefix: str, limit: int = 10) -> list[Tag]:
        """Tags whose name starts with ``prefix``, case-insensitively."""
        return await self.tag_repository.search(prefix.strip(), limit=limit)

    async def add_tag(self, tour: Tour, name: str) -> Tag:
        """Attach a tag to an archived tour, creating the tag if needed.

        Names are trimmed and matched case-insensitively, so "Hiking" and
        " hiking " resolve to the same tag. Adding a tag twice is a no-op.

        Raises:
            BusinessRuleViolationError: If the tour is not archived
            ValidationError: If the trimmed name is empty or too long
        """
        with logfire.span("tag_service.add_tag", tour_id=str(tour.id)):
            self._ensure_archived(tour)

            name = name.strip()
            if not name:
                raise ValidationError("Tag name cannot be empty")
            if len(name) > MAX_TAG_LENGTH:
                raise ValidationError(
                    f"Tag name must be at most {MAX_TAG_LENGTH} characters"
                )

            tag = await self.tag_repository.get_or_create(name)
            await self.tag_repository.add_to_tour(tour.id, tag.id)
            logfire.info("Tag added", tour_id=str(tour.id), tag_id=tag.id)
            return tag

    async def remove_tag(self, tour: Tour, tag_id: TagId) -> None:
        """Detach a tag from an archived tour.

        Raises:
            BusinessRuleViolationError: If the tour is not archived
            NotFoundError: If the tag is not on the tour
        """
        with logfire.span("tag_service.remove_tag", tour_id=str(tour.id), tag_id=tag_id):
            self._ensure_archived(tour)
            if not await self.tag_repository.remove_from_tour(tour.id, tag_id):
                raise NotFoundError("Tag", str(tag_id))
            logfire.info("Tag removed", tour_id=str(tour.id), tag_id=tag_id)
