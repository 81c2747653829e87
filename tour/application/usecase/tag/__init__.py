"""Tag use cases."""

from tour.application.usecase.tag.add_tour_tag import (
    AddTourTagRequest,
    AddTourTagUseCase,
)
from tour.application.usecase.tag.item import TagItem, TagListResponse
from tour.application.usecase.tag.list_tour_tags import (
    ListTourTagsRequest,
    ListTourTagsUseCase,
)
from tour.application.usecase.tag.remove_tour_tag import (
    RemoveTourTagRequest,
    RemoveTourTagUseCase,
)
from tour.application.usecase.tag.search_tags import (
    SearchTagsRequest,
    SearchTagsUseCase,
)

__all__ = [
    "AddTourTagRequest",
    "AddTourTagUseCase",
    "ListTourTagsRequest",
    "ListTourTagsUseCase",
    "RemoveTourTagRequest",
    "RemoveTourTagUseCase",
    "SearchTagsRequest",
    "SearchTagsUseCase",
    "TagItem",
    "TagListResponse",
]
