"""
In-memory member store.

Used for local development and tests. Members are copied on the way in and
on the way out, so a member fetched by a service is never the same object as
the stored record: changes only land through update().
"""

import logging
from typing import Dict, Iterable, List, Optional

from app.services.memberships.exceptions import MemberNotFoundError
from app.services.memberships.interfaces import MemberStore
from app.services.memberships.models import Member

logger = logging.getLogger(__name__)


class InMemoryMemberStore(MemberStore):
    """Dict-backed member store"""

    def __init__(self, members: Optional[Iterable[Member]] = None):
        self._members: Dict[int, Member] = {}
        for member in members or ():
            self.add(member)

    def add(self, member: Member) -> None:
        """Insert or replace a member record."""
        self._members[member.id] = member.copy()

    def get_by_id(self, member_id: int) -> Optional[Member]:
        member = self._members.get(member_id)
        return member.copy() if member is not None else None

    def get_all(self) -> List[Member]:
        return [self._members[member_id].copy() for member_id in sorted(self._members)]

    def update(self, member: Member) -> None:
        if member.id not in self._members:
            raise MemberNotFoundError(member.id)
        self._members[member.id] = member.copy()
        logger.debug(f"MEMBER_UPDATED [member_id={member.id}, is_active={member.is_active}]")

    def __len__(self) -> int:
        return len(self._members)
