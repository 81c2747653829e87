"""Strongly typed identifiers for tour planner entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
TourId = NewType("TourId", UUID)
InvitationId = NewType("InvitationId", UUID)
InvitationOTPId = NewType("InvitationOTPId", UUID)
CommentId = NewType("CommentId", UUID)

# Tags are shared across tours and keyed by a serial integer
TagId = NewType("TagId", int)
