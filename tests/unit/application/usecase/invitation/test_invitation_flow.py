"""Unit tests for the invitee flow: OTP sign-in, lookup, accept and decline."""

from uuid import UUID

import pytest

from tour.adapter.email import MockEmailClient
from tour.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationUseCase,
    DeclineInvitationRequest,
    DeclineInvitationUseCase,
    GetInvitationByTokenRequest,
    GetInvitationByTokenUseCase,
    GetPendingInvitationsRequest,
    GetPendingInvitationsUseCase,
    SendInvitationsRequest,
    SendInvitationsUseCase,
    VerifyInvitationOTPRequest,
    VerifyInvitationOTPUseCase,
)
from tour.domain.error import BusinessRuleViolationError, NotAuthorizedError, NotFoundError
from tour.domain.repository import ParticipantRepository, UserRepository
from tour.domain.service import JWTService
from tour.domain.value import InvitationStatus, TourId, UserId
from tests.conftest import make_user, seed_tour
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def invite_and_sign_in(env, email: str = "guest@example.com"):
    """Invite ``email`` to a fresh tour and verify the emailed OTP."""
    owner, tour = await seed_tour(env)
    send = await env.get(SendInvitationsUseCase)
    await send.execute(
        SendInvitationsRequest(tour_id=str(tour.id), user_id=str(owner.id), emails=[email])
    )
    otp = (await env.get(MockEmailClient)).last_otp()

    verify = await env.get(VerifyInvitationOTPUseCase)
    signed_in = await verify.execute(VerifyInvitationOTPRequest(otp=otp))
    return owner, tour, signed_in


class TestVerifyInvitationOTP:
    """Tests for VerifyInvitationOTPUseCase."""

    @pytest.mark.asyncio
    async def test_creates_user_and_session(self, unit_env):
        # Arrange & Act
        _, _, signed_in = await invite_and_sign_in(unit_env)

        # Assert
        jwt_service = await unit_env.get(JWTService)
        payload = jwt_service.verify_token(signed_in.session_token)
        assert signed_in.is_new_user is True
        assert signed_in.email == "guest@example.com"
        assert payload.user_id == signed_in.user_id
        assert len(signed_in.invitation_token) == 32

    @pytest.mark.asyncio
    async def test_existing_user_is_reused(self, unit_env):
        existing = await (await unit_env.get(UserRepository)).save(
            make_user("guest@example.com")
        )

        _, _, signed_in = await invite_and_sign_in(unit_env)

        assert signed_in.is_new_user is False
        assert signed_in.user_id == str(existing.id)

    @pytest.mark.asyncio
    async def test_bad_otp_is_rejected(self, unit_env):
        verify = await unit_env.get(VerifyInvitationOTPUseCase)

        with pytest.raises(BusinessRuleViolationError):
            await verify.execute(VerifyInvitationOTPRequest(otp="0" * 64))


class TestGetInvitationByToken:
    """Tests for GetInvitationByTokenUseCase."""

    @pytest.mark.asyncio
    async def test_resolves_pending_invitation(self, unit_env):
        _, tour, signed_in = await invite_and_sign_in(unit_env)
        use_case = await unit_env.get(GetInvitationByTokenUseCase)

        response = await use_case.execute(
            GetInvitationByTokenRequest(token=signed_in.invitation_token)
        )

        assert response.tour_id == str(tour.id)
        assert response.tour_title == tour.title
        assert response.inviter_display_name == "Olivia"
        assert response.email == "guest@example.com"
        assert response.status == InvitationStatus.PENDING
        assert response.is_expired is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["short", "f" * 32])
    async def test_malformed_or_unknown_token(self, unit_env, token):
        use_case = await unit_env.get(GetInvitationByTokenUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetInvitationByTokenRequest(token=token))

    @pytest.mark.asyncio
    async def test_answered_invitation_reads_as_not_found(self, unit_env):
        _, _, signed_in = await invite_and_sign_in(unit_env)
        by_token = await unit_env.get(GetInvitationByTokenUseCase)
        invitation = await by_token.execute(
            GetInvitationByTokenRequest(token=signed_in.invitation_token)
        )
        decline = await unit_env.get(DeclineInvitationUseCase)
        await decline.execute(
            DeclineInvitationRequest(invitation_id=invitation.id, user_id=signed_in.user_id)
        )

        with pytest.raises(NotFoundError):
            await by_token.execute(
                GetInvitationByTokenRequest(token=signed_in.invitation_token)
            )


class TestAcceptAndDecline:
    """Tests for AcceptInvitationUseCase, DeclineInvitationUseCase and pending list."""

    @pytest.mark.asyncio
    async def test_accept_joins_tour(self, unit_env):
        # Arrange
        _, tour, signed_in = await invite_and_sign_in(unit_env)
        pending = await unit_env.get(GetPendingInvitationsUseCase)
        listed = await pending.execute(
            GetPendingInvitationsRequest(user_id=signed_in.user_id)
        )
        assert len(listed.invitations) == 1
        assert listed.invitations[0].tour_title == tour.title

        # Act
        accept = await unit_env.get(AcceptInvitationUseCase)
        response = await accept.execute(
            AcceptInvitationRequest(
                invitation_id=listed.invitations[0].id, user_id=signed_in.user_id
            )
        )

        # Assert
        assert response.tour_id == str(tour.id)
        participant_repo = await unit_env.get(ParticipantRepository)
        assert await participant_repo.exists(
            TourId(tour.id), UserId(UUID(signed_in.user_id))
        )
        after = await pending.execute(
            GetPendingInvitationsRequest(user_id=signed_in.user_id)
        )
        assert after.invitations == []

    @pytest.mark.asyncio
    async def test_other_user_cannot_accept(self, unit_env):
        _, _, signed_in = await invite_and_sign_in(unit_env)
        by_token = await unit_env.get(GetInvitationByTokenUseCase)
        invitation = await by_token.execute(
            GetInvitationByTokenRequest(token=signed_in.invitation_token)
        )
        intruder = await (await unit_env.get(UserRepository)).save(
            make_user("intruder@example.com")
        )
        accept = await unit_env.get(AcceptInvitationUseCase)

        with pytest.raises(NotAuthorizedError):
            await accept.execute(
                AcceptInvitationRequest(
                    invitation_id=invitation.id, user_id=str(intruder.id)
                )
            )

    @pytest.mark.asyncio
    async def test_decline_then_accept_is_rejected(self, unit_env):
        _, tour, signed_in = await invite_and_sign_in(unit_env)
        by_token = await unit_env.get(GetInvitationByTokenUseCase)
        invitation = await by_token.execute(
            GetInvitationByTokenRequest(token=signed_in.invitation_token)
        )
        decline = await unit_env.get(DeclineInvitationUseCase)
        declined = await decline.execute(
            DeclineInvitationRequest(invitation_id=invitation.id, user_id=signed_in.user_id)
        )
        assert declined.tour_id == str(tour.id)

        accept = await unit_env.get(AcceptInvitationUseCase)
        with pytest.raises(BusinessRuleViolationError, match="no longer pending"):
            await accept.execute(
                AcceptInvitationRequest(
                    invitation_id=invitation.id, user_id=signed_in.user_id
                )
            )
