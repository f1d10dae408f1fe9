"""
Collaborator interfaces consumed by the membership services.

The services never talk to a database, payment provider or messaging
transport directly. Implementations are passed in at construction time;
reference implementations live in app.adapters.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable, Optional

from app.services.memberships.models import Member


class MemberStore(ABC):
    """Lookup and persistence of member records"""

    @abstractmethod
    def get_by_id(self, member_id: int) -> Optional[Member]:
        """Return the member, or None if no member has this id."""
        ...

    @abstractmethod
    def get_all(self) -> Iterable[Member]:
        """Return every stored member."""
        ...

    @abstractmethod
    def update(self, member: Member) -> None:
        """Persist a mutated member."""
        ...


class PaymentVerifier(ABC):
    """Confirms that a member paid a given amount"""

    @abstractmethod
    def verify_payment(self, member_id: int, amount: Decimal) -> bool:
        ...


class Notifier(ABC):
    """Fire-and-forget delivery of a message to a member"""

    @abstractmethod
    def send_notification(self, message: str, member_id: int) -> None:
        ...
