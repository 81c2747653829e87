"""Unit tests for SendInvitationsUseCase."""

from uuid import uuid4

import pytest

from tour.application.usecase.invitation import (
    SendInvitationsRequest,
    SendInvitationsUseCase,
)
from tour.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from tests.conftest import seed_tour
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSendInvitationsUseCase:
    """Tests for SendInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_owner_can_invite(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SendInvitationsUseCase)
        owner, tour = await seed_tour(unit_env)

        # Act
        response = await use_case.execute(
            SendInvitationsRequest(
                tour_id=str(tour.id),
                user_id=str(owner.id),
                emails=["a@example.com", "b@example.com"],
            )
        )

        # Assert
        assert response.sent == ["a@example.com", "b@example.com"]
        assert response.skipped == []
        assert response.errors == []

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected(self, unit_env):
        use_case = await unit_env.get(SendInvitationsUseCase)
        _, tour = await seed_tour(unit_env)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                SendInvitationsRequest(
                    tour_id=str(tour.id),
                    user_id=str(uuid4()),
                    emails=["a@example.com"],
                )
            )

    @pytest.mark.asyncio
    async def test_batch_size_is_limited(self, unit_env):
        use_case = await unit_env.get(SendInvitationsUseCase)
        owner, tour = await seed_tour(unit_env)

        with pytest.raises(ValidationError, match="50"):
            await use_case.execute(
                SendInvitationsRequest(
                    tour_id=str(tour.id),
                    user_id=str(owner.id),
                    emails=[f"guest{i}@example.com" for i in range(51)],
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_tour(self, unit_env):
        use_case = await unit_env.get(SendInvitationsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                SendInvitationsRequest(
                    tour_id=str(uuid4()),
                    user_id=str(uuid4()),
                    emails=["a@example.com"],
                )
            )

    def test_empty_batch_fails_validation(self):
        with pytest.raises(ValueError):
            SendInvitationsRequest(tour_id=str(uuid4()), user_id=str(uuid4()), emails=[])
