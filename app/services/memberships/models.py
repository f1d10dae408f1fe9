"""
Membership domain model.

A Member is an owned value: services fetch it from the store, mutate the
local copy and hand it back to the store explicitly. Nothing here touches
the store, payments or notifications.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from app.services.memberships.exceptions import InvalidRenewalPeriodError


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so comparisons never mix naive and aware values."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_subscription_end(value: Any) -> Optional[datetime]:
    """
    Parse subscription_end from storage format.

    Args:
        value: datetime, ISO string (optionally with trailing Z) or None

    Returns:
        Timezone-aware datetime, or None if value cannot be parsed
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return ensure_utc(value)

    if isinstance(value, str):
        try:
            return ensure_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
        except ValueError:
            return None

    return None


@dataclass
class Member:
    """One subscriber record"""
    id: int
    name: str
    is_active: bool = True
    subscription_end: Optional[datetime] = None

    def __post_init__(self):
        if self.subscription_end is None:
            self.subscription_end = utc_now()
        else:
            self.subscription_end = ensure_utc(self.subscription_end)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """
        Real-time expiry check.

        is_active is only cleared by the deactivation sweep, so a lapsed member
        can still read as active until the next sweep. Callers that need the
        current answer should use this instead of is_active.
        """
        if now is None:
            now = utc_now()
        return self.subscription_end < ensure_utc(now)

    def extend(self, days: int) -> datetime:
        """
        Push subscription_end forward by days, counting from the current end.

        Unused paid time is preserved when a member renews before expiry.

        Raises:
            InvalidRenewalPeriodError: If days is not positive
        """
        if days <= 0:
            raise InvalidRenewalPeriodError(f"Renewal period must be positive, got {days} days")
        self.subscription_end = self.subscription_end + timedelta(days=days)
        return self.subscription_end

    def copy(self) -> "Member":
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "is_active": self.is_active,
            "subscription_end": self.subscription_end.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Member":
        subscription_end = parse_subscription_end(data.get("subscription_end"))
        if subscription_end is None:
            raise ValueError(f"Invalid subscription_end for member {data.get('id')}: {data.get('subscription_end')!r}")
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            is_active=bool(data.get("is_active", False)),
            subscription_end=subscription_end,
        )
