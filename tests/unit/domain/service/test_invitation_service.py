"""Unit tests for InvitationService."""

from datetime import datetime, timedelta, timezone

import pytest

from tour.adapter.email import MockEmailClient
from tour.domain.error import (
    BusinessRuleViolationError,
    DeliveryError,
    NotAuthorizedError,
    NotFoundError,
)
from tour.domain.repository import (
    InvitationOTPRepository,
    InvitationRepository,
    ParticipantRepository,
)
from tour.domain.service import InvitationService
from tour.domain.value import InvitationStatus, OTPToken, TourStatus
from tests.conftest import make_invitation, make_user, seed_tour
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestSendInvitations:
    """Tests for send_invitations."""

    @pytest.mark.asyncio
    async def test_sends_normalized_invitations(self, unit_env):
        # Arrange
        service = await unit_env.get(InvitationService)
        email_client = await unit_env.get(MockEmailClient)
        invitation_repo = await unit_env.get(InvitationRepository)
        owner, tour = await seed_tour(unit_env)

        # Act
        result = await service.send_invitations(
            tour, owner.id, ["  Alice@Example.com ", "bob@example.com"]
        )

        # Assert
        assert result.sent == ["alice@example.com", "bob@example.com"]
        assert result.skipped == []
        assert result.errors == []

        invitations, total = await service.list_tour_invitations(tour.id)
        assert total == 2
        assert all(inv.status == InvitationStatus.PENDING for inv in invitations)
        assert all(len(inv.token.root) == 32 for inv in invitations)

        assert [m.to for m in email_client.sent] == [
            "alice@example.com",
            "bob@example.com",
        ]
        message = email_client.sent[0]
        assert message.inviter_name == "Olivia"
        assert message.tour_title == tour.title
        assert "/en-US/auth/verify-invitation?otp=" in message.invitation_url
        assert await invitation_repo.count_by_tour(tour.id) == 2

    @pytest.mark.asyncio
    async def test_otp_links_invitation(self, unit_env):
        service = await unit_env.get(InvitationService)
        email_client = await unit_env.get(MockEmailClient)
        otp_repo = await unit_env.get(InvitationOTPRepository)
        owner, tour = await seed_tour(unit_env)

        await service.send_invitations(tour, owner.id, ["guest@example.com"])

        otp = await otp_repo.find_by_token(OTPToken(email_client.last_otp()))
        invitations, _ = await service.list_tour_invitations(tour.id)
        assert otp is not None
        assert otp.invitation_token == invitations[0].token
        assert otp.email.root == "guest@example.com"
        assert otp.used is False

    @pytest.mark.asyncio
    async def test_skips_participants_existing_and_duplicates(self, unit_env):
        # Arrange
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        owner, tour = await seed_tour(unit_env)
        await invitation_repo.save(
            make_invitation(tour, "declined@example.com", InvitationStatus.DECLINED)
        )
        await invitation_repo.save(make_invitation(tour, "pending@example.com"))

        # Act
        result = await service.send_invitations(
            tour,
            owner.id,
            [
                "owner@example.com",
                "declined@example.com",
                "PENDING@example.com",
                "new@example.com",
                "new@example.com",
            ],
        )

        # Assert
        assert result.sent == ["new@example.com"]
        assert result.skipped == [
            "owner@example.com",
            "declined@example.com",
            "pending@example.com",
            "new@example.com",
        ]

    @pytest.mark.asyncio
    async def test_collects_invalid_and_failed_addresses(self, unit_env):
        service = await unit_env.get(InvitationService)
        email_client = await unit_env.get(MockEmailClient)
        email_client.fail_for.add("bounce@example.com")
        owner, tour = await seed_tour(unit_env)

        result = await service.send_invitations(
            tour, owner.id, ["not-an-email", "bounce@example.com", "ok@example.com"]
        )

        assert result.sent == ["ok@example.com"]
        assert [e.email for e in result.errors] == ["not-an-email", "bounce@example.com"]
        assert result.errors[0].error == "Invalid email address format"
        assert result.errors[1].error == "Mock delivery failure"

    @pytest.mark.asyncio
    async def test_unexpected_client_error_does_not_abort_batch(self, unit_env):
        service = await unit_env.get(InvitationService)
        email_client = await unit_env.get(MockEmailClient)
        owner, tour = await seed_tour(unit_env)
        record = email_client.send_invitation_email

        async def crash_for_bob(email):
            if email.to == "bob@example.com":
                raise RuntimeError("provider SDK blew up")
            return await record(email)

        email_client.send_invitation_email = crash_for_bob

        result = await service.send_invitations(
            tour, owner.id, ["alice@example.com", "bob@example.com", "carol@example.com"]
        )

        assert result.sent == ["alice@example.com", "carol@example.com"]
        assert [e.email for e in result.errors] == ["bob@example.com"]
        assert result.errors[0].error == "Failed to send invitation"
        assert [m.to for m in email_client.sent] == [
            "alice@example.com",
            "carol@example.com",
        ]

    @pytest.mark.asyncio
    async def test_archived_tour_is_rejected(self, unit_env):
        service = await unit_env.get(InvitationService)
        owner, tour = await seed_tour(unit_env, TourStatus.ARCHIVED)

        with pytest.raises(BusinessRuleViolationError, match="archived"):
            await service.send_invitations(tour, owner.id, ["guest@example.com"])


class TestOwnerActions:
    """Tests for cancel_invitation and resend_invitation."""

    @pytest.mark.asyncio
    async def test_cancel_deletes(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        owner, tour = await seed_tour(unit_env)
        invitation = await invitation_repo.save(make_invitation(tour))

        await service.cancel_invitation(invitation, tour, owner.id)

        with pytest.raises(NotFoundError):
            await service.get_invitation(invitation.id)

    @pytest.mark.asyncio
    async def test_cancel_by_non_owner_is_rejected(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        _, tour = await seed_tour(unit_env)
        invitation = await invitation_repo.save(make_invitation(tour))
        stranger = make_user("stranger@example.com")

        with pytest.raises(NotAuthorizedError):
            await service.cancel_invitation(invitation, tour, stranger.id)

    @pytest.mark.asyncio
    async def test_cancel_accepted_is_rejected(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        owner, tour = await seed_tour(unit_env)
        invitation = await invitation_repo.save(
            make_invitation(tour, status=InvitationStatus.ACCEPTED)
        )

        with pytest.raises(BusinessRuleViolationError, match="accepted"):
            await service.cancel_invitation(invitation, tour, owner.id)

    @pytest.mark.asyncio
    async def test_resend_declined_issues_new_token_and_email(self, unit_env):
        # Arrange
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        email_client = await unit_env.get(MockEmailClient)
        owner, tour = await seed_tour(unit_env)
        invitation = await invitation_repo.save(
            make_invitation(
                tour,
                status=InvitationStatus.DECLINED,
                expires_at=datetime.now(timezone.utc) - timedelta(days=1),
            )
        )

        # Act
        resent = await service.resend_invitation(invitation, tour, owner.id)

        # Assert
        assert resent.id == invitation.id
        assert resent.status == InvitationStatus.PENDING
        assert resent.token != invitation.token
        assert resent.expires_at > datetime.now(timezone.utc) + timedelta(days=13)
        assert len(email_client.sent) == 1
        assert (await invitation_repo.find_by_token(invitation.token)) is None

    @pytest.mark.asyncio
    async def test_resend_accepted_is_rejected(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        owner, tour = await seed_tour(unit_env)
        invitation = await invitation_repo.save(
            make_invitation(tour, status=InvitationStatus.ACCEPTED)
        )

        with pytest.raises(BusinessRuleViolationError):
            await service.resend_invitation(invitation, tour, owner.id)

    @pytest.mark.asyncio
    async def test_resend_on_archived_tour_is_rejected(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        owner, tour = await seed_tour(unit_env, TourStatus.ARCHIVED)
        invitation = await invitation_repo.save(
            make_invitation(tour, status=InvitationStatus.DECLINED)
        )

        with pytest.raises(BusinessRuleViolationError, match="archived"):
            await service.resend_invitation(invitation, tour, owner.id)

    @pytest.mark.asyncio
    async def test_resend_delivery_failure_raises(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        email_client = await unit_env.get(MockEmailClient)
        email_client.fail_for.add("guest@example.com")
        owner, tour = await seed_tour(unit_env)
        invitation = await invitation_repo.save(
            make_invitation(tour, status=InvitationStatus.DECLINED)
        )

        with pytest.raises(DeliveryError):
            await service.resend_invitation(invitation, tour, owner.id)


class TestInviteeActions:
    """Tests for accept_invitation, decline_invitation and verify_otp."""

    @pytest.mark.asyncio
    async def test_accept_adds_participant(self, unit_env):
        # Arrange
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        participant_repo = await unit_env.get(ParticipantRepository)
        _, tour = await seed_tour(unit_env)
        guest = make_user("guest@example.com")
        invitation = await invitation_repo.save(make_invitation(tour))

        # Act
        accepted = await service.accept_invitation(invitation, tour, guest)

        # Assert
        assert accepted.status == InvitationStatus.ACCEPTED
        assert await participant_repo.exists(tour.id, guest.id)

    @pytest.mark.asyncio
    async def test_accept_with_other_email_is_forbidden(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        _, tour = await seed_tour(unit_env)
        invitation = await invitation_repo.save(make_invitation(tour))

        with pytest.raises(NotAuthorizedError):
            await service.accept_invitation(
                invitation, tour, make_user("intruder@example.com")
            )

    @pytest.mark.asyncio
    async def test_accept_expired_is_rejected(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        _, tour = await seed_tour(unit_env)
        invitation = await invitation_repo.save(
            make_invitation(
                tour, expires_at=datetime.now(timezone.utc) - timedelta(minutes=1)
            )
        )

        with pytest.raises(BusinessRuleViolationError, match="expired"):
            await service.accept_invitation(
                invitation, tour, make_user("guest@example.com")
            )

    @pytest.mark.asyncio
    async def test_accept_twice_is_rejected(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        _, tour = await seed_tour(unit_env)
        guest = make_user("guest@example.com")
        invitation = await invitation_repo.save(make_invitation(tour))
        accepted = await service.accept_invitation(invitation, tour, guest)

        with pytest.raises(BusinessRuleViolationError, match="already been accepted"):
            await service.accept_invitation(accepted, tour, guest)

    @pytest.mark.asyncio
    async def test_accept_on_archived_tour_is_rejected(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        _, tour = await seed_tour(unit_env, TourStatus.ARCHIVED)
        invitation = await invitation_repo.save(make_invitation(tour))

        with pytest.raises(BusinessRuleViolationError, match="archived"):
            await service.accept_invitation(
                invitation, tour, make_user("guest@example.com")
            )

    @pytest.mark.asyncio
    async def test_decline_marks_declined(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        _, tour = await seed_tour(unit_env)
        invitation = await invitation_repo.save(make_invitation(tour))

        declined = await service.decline_invitation(
            invitation, make_user("guest@example.com")
        )

        assert declined.status == InvitationStatus.DECLINED
        stored = await invitation_repo.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.DECLINED

    @pytest.mark.asyncio
    async def test_decline_declined_is_rejected(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        _, tour = await seed_tour(unit_env)
        invitation = await invitation_repo.save(
            make_invitation(tour, status=InvitationStatus.DECLINED)
        )

        with pytest.raises(BusinessRuleViolationError, match="no longer pending"):
            await service.decline_invitation(invitation, make_user("guest@example.com"))

    @pytest.mark.asyncio
    async def test_verify_otp_is_single_use(self, unit_env):
        service = await unit_env.get(InvitationService)
        email_client = await unit_env.get(MockEmailClient)
        owner, tour = await seed_tour(unit_env)
        await service.send_invitations(tour, owner.id, ["guest@example.com"])
        otp = email_client.last_otp()

        consumed = await service.verify_otp(otp)

        assert consumed.used is True
        with pytest.raises(BusinessRuleViolationError, match="Invalid or expired link"):
            await service.verify_otp(otp)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("otp", ["", "nothex", "a" * 64])
    async def test_verify_unknown_otp_is_rejected(self, unit_env, otp):
        service = await unit_env.get(InvitationService)

        with pytest.raises(BusinessRuleViolationError, match="Invalid or expired link"):
            await service.verify_otp(otp)


class TestQueries:
    """Tests for listing and lookups."""

    @pytest.mark.asyncio
    async def test_pending_for_user_excludes_expired_and_answered(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        _, tour = await seed_tour(unit_env)
        live = await invitation_repo.save(make_invitation(tour))
        await invitation_repo.save(
            make_invitation(
                tour, expires_at=datetime.now(timezone.utc) - timedelta(days=1)
            )
        )
        await invitation_repo.save(
            make_invitation(tour, status=InvitationStatus.DECLINED)
        )

        pending = await service.get_user_pending_invitations(
            make_user("guest@example.com").email
        )

        assert [inv.id for inv in pending] == [live.id]

    @pytest.mark.asyncio
    async def test_list_is_paginated(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        _, tour = await seed_tour(unit_env)
        for i in range(5):
            await invitation_repo.save(make_invitation(tour, f"guest{i}@example.com"))

        page, total = await service.list_tour_invitations(tour.id, page=2, limit=2)

        assert total == 5
        assert len(page) == 2

    @pytest.mark.asyncio
    async def test_get_by_token_unknown_raises(self, unit_env):
        service = await unit_env.get(InvitationService)
        _, tour = await seed_tour(unit_env)

        with pytest.raises(NotFoundError):
            await service.get_invitation_by_token(make_invitation(tour).token)
