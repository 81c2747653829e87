"""Tag as returned by the API."""

from pydantic import BaseModel

from tour.domain.model import Tag


class TagItem(BaseModel):
    id: int
    name: str

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagItem":
        return cls(id=tag.id, name=tag.name)


class TagListResponse(BaseModel):
    data: list[TagItem]
