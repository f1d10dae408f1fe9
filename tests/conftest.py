"""
Pytest configuration and shared fixtures for membership tests.
"""
import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from app.services.memberships import (
    Member,
    MemberStore,
    MembershipStatusChecker,
    Notifier,
    PaymentVerifier,
    SubscriptionService,
)


@pytest.fixture
def fixed_now():
    """Fixed datetime for deterministic tests"""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_member():
    """Factory for members expiring a number of days from a reference time"""
    def _make(member_id=1, name="Oleksandr", is_active=True, days_left=0, now=None):
        now = now or datetime.now(timezone.utc)
        return Member(
            id=member_id,
            name=name,
            is_active=is_active,
            subscription_end=now + timedelta(days=days_left),
        )
    return _make


@pytest.fixture
def mock_store():
    """Mock member store"""
    store = MagicMock(spec=MemberStore)
    store.get_all.return_value = []
    return store


@pytest.fixture
def mock_payments():
    """Mock payment verifier"""
    payments = MagicMock(spec=PaymentVerifier)
    payments.verify_payment.return_value = True
    return payments


@pytest.fixture
def mock_notifier():
    """Mock notifier"""
    return MagicMock(spec=Notifier)


@pytest.fixture
def subscription_service(mock_store, mock_payments, mock_notifier):
    return SubscriptionService(mock_store, mock_payments, mock_notifier)


@pytest.fixture
def status_checker(mock_store):
    return MembershipStatusChecker(mock_store)
