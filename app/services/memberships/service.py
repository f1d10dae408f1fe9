"""
Subscription Service Layer

Business logic for subscription renewal and expiry-driven deactivation.
Collaborators (member store, payment verifier, notifier) are injected at
construction; this module decides what to do and in which order, and
leaves persistence and delivery to them.

Outcome policy:
- Unknown member id → MemberNotFoundError raised (caller misuse)
- Non-positive renewal period → False returned (business outcome)
- Payment not verified → False returned (business outcome)
- Collaborator exceptions propagate unchanged, nothing is retried
- Notification failure after a persisted update does not roll the update back
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from app.core.structured_logger import log_event
from app.services.memberships.exceptions import MemberNotFoundError
from app.services.memberships.interfaces import MemberStore, Notifier, PaymentVerifier
from app.services.memberships.models import ensure_utc, utc_now

logger = logging.getLogger(__name__)

RENEWAL_MESSAGE = "Subscription renewed!"
EXPIRY_MESSAGE = "Subscription expired"


# ====================================================================================
# Result Types
# ====================================================================================

@dataclass
class SweepResult:
    """Outcome of one deactivation sweep"""
    checked: int = 0
    deactivated: int = 0
    skipped_inactive: int = 0
    deactivated_ids: List[int] = field(default_factory=list)


# ====================================================================================
# Subscription Service
# ====================================================================================

class SubscriptionService:
    """Renews subscriptions and deactivates expired members"""

    def __init__(self, store: MemberStore, payments: PaymentVerifier, notifier: Notifier):
        self._store = store
        self._payments = payments
        self._notifier = notifier

    def renew_subscription(self, member_id: int, payment_amount: Decimal, days: int) -> bool:
        """
        Renew a member's subscription after verifying payment.

        The new subscription_end is counted from the existing one, so members
        renewing early keep the time they already paid for.

        Args:
            member_id: Member to renew
            payment_amount: Amount the member paid
            days: Renewal period in days, must be positive

        Returns:
            True if the subscription was extended, False if the period is
            invalid or the payment could not be verified

        Raises:
            MemberNotFoundError: If no member has this id
        """
        if days <= 0:
            logger.info(f"RENEWAL_REJECTED_INVALID_PERIOD [member_id={member_id}, days={days}]")
            return False

        member = self._store.get_by_id(member_id)
        if member is None:
            logger.warning(f"RENEWAL_MEMBER_NOT_FOUND [member_id={member_id}]")
            raise MemberNotFoundError(member_id)

        if not self._payments.verify_payment(member_id, payment_amount):
            log_event(
                logger,
                component="service",
                operation="renew_subscription",
                outcome="rejected",
                reason="payment_not_verified",
                message=f"RENEWAL_PAYMENT_NOT_VERIFIED [member_id={member_id}, amount={payment_amount}]",
            )
            return False

        previous_end = member.subscription_end
        new_end = member.extend(days)
        if not member.is_active and not member.is_expired():
            member.is_active = True

        self._store.update(member)
        self._notifier.send_notification(RENEWAL_MESSAGE, member_id)

        log_event(
            logger,
            component="service",
            operation="renew_subscription",
            outcome="success",
            message=(
                f"SUBSCRIPTION_RENEWED [member_id={member_id}, days={days}, "
                f"previous_end={previous_end.isoformat()}, new_end={new_end.isoformat()}]"
            ),
        )
        return True

    def deactivate_expired_members(self, now: Optional[datetime] = None) -> SweepResult:
        """
        Mark every active member whose subscription has lapsed as inactive.

        Each expired member is updated and notified before the next member is
        looked at. Members that are already inactive are skipped, so running
        the sweep twice sends nothing new.

        Args:
            now: Reference time (defaults to current UTC time)

        Returns:
            SweepResult with per-sweep counts
        """
        now = utc_now() if now is None else ensure_utc(now)
        result = SweepResult()

        for member in self._store.get_all():
            result.checked += 1

            if not member.is_expired(now):
                continue

            if not member.is_active:
                result.skipped_inactive += 1
                continue

            member.is_active = False
            self._store.update(member)
            self._notifier.send_notification(EXPIRY_MESSAGE, member.id)

            result.deactivated += 1
            result.deactivated_ids.append(member.id)
            logger.info(
                f"MEMBER_DEACTIVATED [member_id={member.id}, "
                f"subscription_end={member.subscription_end.isoformat()}]"
            )

        log_event(
            logger,
            component="service",
            operation="deactivate_expired_members",
            outcome="success",
            message=(
                f"EXPIRY_SWEEP_DONE [checked={result.checked}, deactivated={result.deactivated}, "
                f"skipped_inactive={result.skipped_inactive}]"
            ),
        )
        return result
