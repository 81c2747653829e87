"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from tour.domain.model.invitation import Invitation
from tour.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    TourId,
)


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find an invitation by its link token.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_token(self, token: InvitationToken) -> bool:
        """Check whether a token is already in use.

        Used to retry token generation on collision.
        """
        pass

    @abstractmethod
    async def find_by_tour(
        self, tour_id: TourId, limit: int = 20, offset: int = 0
    ) -> list[Invitation]:
        """Find invitations of a tour, newest first.

        Args:
            tour_id: The tour's ID
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invitations
        """
        pass

    @abstractmethod
    async def count_by_tour(self, tour_id: TourId) -> int:
        """Count all invitations of a tour."""
        pass

    @abstractmethod
    async def find_emails_by_tour_and_status(
        self, tour_id: TourId, statuses: list[InvitationStatus]
    ) -> set[Email]:
        """Return invited addresses of a tour with one of the given statuses.

        Used to skip addresses that already hold a live or declined invitation.
        """
        pass

    @abstractmethod
    async def find_pending_by_email(
        self, email: Email, not_expired_at: datetime
    ) -> list[Invitation]:
        """Find pending invitations addressed to an email, newest first.

        Args:
            email: Invitee address
            not_expired_at: Only invitations with ``expires_at`` after this instant

        Returns:
            List of pending, unexpired invitations
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation
        """
        pass

    @abstractmethod
    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation.

        Returns:
            True if a row was deleted, False if it did not exist
        """
        pass
