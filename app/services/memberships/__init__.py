"""
Membership Service Package

Status checks, subscription renewal and expiry-driven deactivation.
"""

from app.services.memberships.models import Member
from app.services.memberships.interfaces import (
    MemberStore,
    PaymentVerifier,
    Notifier,
)
from app.services.memberships.status import MembershipStatusChecker
from app.services.memberships.service import (
    SubscriptionService,
    SweepResult,
    RENEWAL_MESSAGE,
    EXPIRY_MESSAGE,
)
from app.services.memberships.exceptions import (
    MembershipServiceError,
    MembershipValidationError,
    MemberNotFoundError,
    InvalidRenewalPeriodError,
)

__all__ = [
    "Member",
    "MemberStore",
    "PaymentVerifier",
    "Notifier",
    "MembershipStatusChecker",
    "SubscriptionService",
    "SweepResult",
    "RENEWAL_MESSAGE",
    "EXPIRY_MESSAGE",
    "MembershipServiceError",
    "MembershipValidationError",
    "MemberNotFoundError",
    "InvalidRenewalPeriodError",
]
