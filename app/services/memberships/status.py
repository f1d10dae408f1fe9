"""
Membership status checks.

Reads the stored is_active flag. The flag is maintained by the deactivation
sweep, not recomputed here (see Member.is_expired for a real-time check).
"""

import logging

from app.services.memberships.exceptions import MemberNotFoundError
from app.services.memberships.interfaces import MemberStore

logger = logging.getLogger(__name__)


class MembershipStatusChecker:
    """Answers whether a member is currently marked active"""

    def __init__(self, store: MemberStore):
        self._store = store

    def is_active(self, member_id: int) -> bool:
        """
        Return the stored is_active flag for a member.

        Performs exactly one store lookup and no writes.

        Raises:
            MemberNotFoundError: If no member has this id
        """
        member = self._store.get_by_id(member_id)
        if member is None:
            logger.warning(f"STATUS_CHECK_MEMBER_NOT_FOUND [member_id={member_id}]")
            raise MemberNotFoundError(member_id)

        return member.is_active
