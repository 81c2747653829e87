"""Unit tests for InvitationPermissions."""

from datetime import datetime, timedelta, timezone

import pytest

from tour.domain.service import InvitationActions, InvitationPermissions
from tour.domain.value import InvitationStatus
from tests.conftest import make_invitation, make_tour, make_user

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


def invitation(status: InvitationStatus, expires_at: datetime):
    tour = make_tour(make_user())
    return make_invitation(tour, status=status, expires_at=expires_at)


class TestIsExpired:
    """Tests for is_expired."""

    def test_future_expiry_is_not_expired(self):
        inv = invitation(InvitationStatus.PENDING, NOW + timedelta(days=1))
        assert InvitationPermissions.is_expired(inv, NOW) is False

    def test_expiry_at_now_is_not_expired(self):
        """Boundary: an invitation expiring exactly now is still valid."""
        inv = invitation(InvitationStatus.PENDING, NOW)
        assert InvitationPermissions.is_expired(inv, NOW) is False

    def test_one_microsecond_later_is_expired(self):
        inv = invitation(InvitationStatus.PENDING, NOW)
        later = NOW + timedelta(microseconds=1)
        assert InvitationPermissions.is_expired(inv, later) is True

    def test_defaults_to_current_time(self):
        past = invitation(
            InvitationStatus.PENDING, datetime.now(timezone.utc) - timedelta(days=1)
        )
        future = invitation(
            InvitationStatus.PENDING, datetime.now(timezone.utc) + timedelta(days=1)
        )

        assert InvitationPermissions.is_expired(past) is True
        assert InvitationPermissions.is_expired(future) is False


class TestCanCancel:
    """Tests for can_cancel."""

    def test_owner_can_cancel_live_pending(self):
        inv = invitation(InvitationStatus.PENDING, NOW + timedelta(days=1))
        assert InvitationPermissions.can_cancel(inv, True, NOW) is True

    def test_non_owner_cannot_cancel(self):
        inv = invitation(InvitationStatus.PENDING, NOW + timedelta(days=1))
        assert InvitationPermissions.can_cancel(inv, False, NOW) is False

    def test_expired_pending_cannot_be_cancelled(self):
        inv = invitation(InvitationStatus.PENDING, NOW - timedelta(days=1))
        assert InvitationPermissions.can_cancel(inv, True, NOW) is False

    @pytest.mark.parametrize(
        "status", [InvitationStatus.ACCEPTED, InvitationStatus.DECLINED]
    )
    def test_non_pending_cannot_be_cancelled(self, status):
        inv = invitation(status, NOW + timedelta(days=1))
        assert InvitationPermissions.can_cancel(inv, True, NOW) is False


class TestCanResend:
    """Tests for can_resend."""

    def test_declined_can_be_resent(self):
        """Declined invitations can be resent even before expiry."""
        inv = invitation(InvitationStatus.DECLINED, NOW + timedelta(days=1))
        assert InvitationPermissions.can_resend(inv, True, NOW) is True

    def test_expired_pending_can_be_resent(self):
        inv = invitation(InvitationStatus.PENDING, NOW - timedelta(seconds=1))
        assert InvitationPermissions.can_resend(inv, True, NOW) is True

    def test_live_pending_cannot_be_resent(self):
        inv = invitation(InvitationStatus.PENDING, NOW + timedelta(days=1))
        assert InvitationPermissions.can_resend(inv, True, NOW) is False

    def test_accepted_cannot_be_resent(self):
        inv = invitation(InvitationStatus.ACCEPTED, NOW - timedelta(days=1))
        assert InvitationPermissions.can_resend(inv, True, NOW) is False

    def test_non_owner_cannot_resend(self):
        inv = invitation(InvitationStatus.DECLINED, NOW - timedelta(days=1))
        assert InvitationPermissions.can_resend(inv, False, NOW) is False


class TestCanRemove:
    """can_remove always agrees with can_resend."""

    @pytest.mark.parametrize("status", list(InvitationStatus))
    @pytest.mark.parametrize("is_owner", [True, False])
    @pytest.mark.parametrize("offset", [timedelta(days=-1), timedelta(0), timedelta(days=1)])
    def test_matches_can_resend(self, status, is_owner, offset):
        inv = invitation(status, NOW + offset)
        assert InvitationPermissions.can_remove(
            inv, is_owner, NOW
        ) == InvitationPermissions.can_resend(inv, is_owner, NOW)


class TestGetAvailableActions:
    """Tests for get_available_actions."""

    def test_live_pending_for_owner(self):
        inv = invitation(InvitationStatus.PENDING, NOW + timedelta(days=1))

        actions = InvitationPermissions.get_available_actions(inv, True, NOW)

        assert actions == InvitationActions(
            can_cancel=True, can_resend=False, can_remove=False
        )

    def test_expired_pending_for_owner(self):
        inv = invitation(InvitationStatus.PENDING, NOW - timedelta(days=1))

        actions = InvitationPermissions.get_available_actions(inv, True, NOW)

        assert actions == InvitationActions(
            can_cancel=False, can_resend=True, can_remove=True
        )

    def test_accepted_for_owner_has_no_actions(self):
        inv = invitation(InvitationStatus.ACCEPTED, NOW + timedelta(days=1))

        actions = InvitationPermissions.get_available_actions(inv, True, NOW)

        assert actions == InvitationActions(
            can_cancel=False, can_resend=False, can_remove=False
        )

    def test_non_owner_has_no_actions(self):
        inv = invitation(InvitationStatus.DECLINED, NOW - timedelta(days=1))

        actions = InvitationPermissions.get_available_actions(inv, False, NOW)

        assert not (actions.can_cancel or actions.can_resend or actions.can_remove)

    def test_deterministic_for_identical_inputs(self):
        inv = invitation(InvitationStatus.PENDING, NOW)

        first = InvitationPermissions.get_available_actions(inv, True, NOW)
        second = InvitationPermissions.get_available_actions(inv, True, NOW)

        assert first == second
