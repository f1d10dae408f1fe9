"""
Unit tests for the Member model.
"""
import pytest
from datetime import datetime, timedelta, timezone

from app.services.memberships import InvalidRenewalPeriodError, Member
from app.services.memberships.models import parse_subscription_end


class TestParseSubscriptionEnd:
    """Tests for parse_subscription_end function"""

    def test_parse_none(self):
        """None should return None"""
        assert parse_subscription_end(None) is None

    def test_parse_aware_datetime(self):
        """Aware datetime should be returned as-is"""
        dt = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        assert parse_subscription_end(dt) == dt

    def test_parse_naive_datetime(self):
        """Naive datetime is interpreted as UTC"""
        result = parse_subscription_end(datetime(2024, 1, 15, 12, 0, 0))
        assert result.tzinfo == timezone.utc

    def test_parse_iso_string_with_z(self):
        """ISO string with Z should be parsed correctly"""
        result = parse_subscription_end("2024-01-15T12:00:00Z")
        assert result == datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

    def test_parse_invalid_string(self):
        """Invalid string should return None"""
        assert parse_subscription_end("not-a-date") is None

    def test_parse_other_type(self):
        """Non-datetime, non-string should return None"""
        assert parse_subscription_end(12345) is None


class TestMemberExpiry:
    """Tests for Member.is_expired"""

    def test_future_end_not_expired(self, fixed_now):
        member = Member(id=1, name="Oleksandr", subscription_end=fixed_now + timedelta(days=1))
        assert member.is_expired(fixed_now) is False

    def test_past_end_expired(self, fixed_now):
        member = Member(id=1, name="Oleksandr", subscription_end=fixed_now - timedelta(seconds=1))
        assert member.is_expired(fixed_now) is True

    def test_end_exactly_now_not_expired(self, fixed_now):
        """Expiry is strictly before now"""
        member = Member(id=1, name="Oleksandr", subscription_end=fixed_now)
        assert member.is_expired(fixed_now) is False

    def test_expired_regardless_of_flag(self, fixed_now):
        """is_expired looks at the date, not the stored flag"""
        member = Member(id=1, name="Oleksandr", is_active=True, subscription_end=fixed_now - timedelta(days=3))
        assert member.is_active is True
        assert member.is_expired(fixed_now) is True


class TestMemberExtend:
    """Tests for Member.extend"""

    def test_extend_from_current_end(self, fixed_now):
        member = Member(id=1, name="Oleksandr", subscription_end=fixed_now)
        new_end = member.extend(10)
        assert new_end == fixed_now + timedelta(days=10)
        assert member.subscription_end == new_end

    @pytest.mark.parametrize("days", [0, -1])
    def test_extend_rejects_non_positive(self, fixed_now, days):
        """subscription_end never moves backwards"""
        member = Member(id=1, name="Oleksandr", subscription_end=fixed_now)
        with pytest.raises(InvalidRenewalPeriodError):
            member.extend(days)
        assert member.subscription_end == fixed_now


class TestMemberSerialization:
    """Tests for Member.to_dict / Member.from_dict"""

    def test_to_dict(self, fixed_now):
        member = Member(id=3, name="Egor", is_active=False, subscription_end=fixed_now)
        assert member.to_dict() == {
            "id": 3,
            "name": "Egor",
            "is_active": False,
            "subscription_end": "2024-01-15T12:00:00+00:00",
        }

    def test_from_dict(self, fixed_now):
        member = Member.from_dict({
            "id": 3,
            "name": "Egor",
            "is_active": True,
            "subscription_end": "2024-01-15T12:00:00Z",
        })
        assert member == Member(id=3, name="Egor", is_active=True, subscription_end=fixed_now)

    def test_from_dict_invalid_end(self):
        """Unparseable subscription_end is rejected"""
        with pytest.raises(ValueError):
            Member.from_dict({"id": 1, "name": "x", "is_active": True, "subscription_end": "soon"})

    def test_copy_is_independent(self, fixed_now):
        member = Member(id=1, name="Oleksandr", subscription_end=fixed_now)
        clone = member.copy()
        clone.is_active = False
        clone.extend(5)
        assert member.is_active is True
        assert member.subscription_end == fixed_now
