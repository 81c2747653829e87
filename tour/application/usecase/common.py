"""Response models shared by several use cases."""

from pydantic import BaseModel

from tour.domain.model import User


class Pagination(BaseModel):
    """Pagination metadata."""

    page: int
    limit: int
    total: int


class UserSummary(BaseModel):
    """Another user as shown next to their votes or comments."""

    user_id: str
    display_name: str

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        # Users without a display name are shown by address
        return cls(user_id=str(user.id), display_name=user.display_name or user.email.root)
