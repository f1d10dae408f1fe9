"""
Redis-backed member store.

Key layout (prefix defaults to "membership"):
- <prefix>:member:<id>  JSON document, see Member.to_dict()
- <prefix>:members      set of all member ids

The client must be created with decode_responses=True.
"""

import json
import logging
from typing import List, Optional

import redis

from app.services.memberships.exceptions import MemberNotFoundError
from app.services.memberships.interfaces import MemberStore
from app.services.memberships.models import Member

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "membership"


class RedisMemberStore(MemberStore):
    """Member store persisted in Redis"""

    def __init__(self, client: redis.Redis, prefix: str = DEFAULT_KEY_PREFIX):
        self._client = client
        self._prefix = prefix

    @property
    def index_key(self) -> str:
        return f"{self._prefix}:members"

    def member_key(self, member_id: int) -> str:
        return f"{self._prefix}:member:{member_id}"

    def add(self, member: Member) -> None:
        """Insert or replace a member record and index its id."""
        pipe = self._client.pipeline()
        pipe.set(self.member_key(member.id), json.dumps(member.to_dict()))
        pipe.sadd(self.index_key, member.id)
        pipe.execute()

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raw = self._client.get(self.member_key(member_id))
        if raw is None:
            return None
        return Member.from_dict(json.loads(raw))

    def get_all(self) -> List[Member]:
        member_ids = sorted(int(member_id) for member_id in self._client.smembers(self.index_key))
        if not member_ids:
            return []

        documents = self._client.mget([self.member_key(member_id) for member_id in member_ids])
        members = []
        for member_id, raw in zip(member_ids, documents):
            if raw is None:
                # Indexed but the document is gone
                logger.warning(f"REDIS_MEMBER_MISSING [member_id={member_id}, index={self.index_key}]")
                continue
            members.append(Member.from_dict(json.loads(raw)))
        return members

    def update(self, member: Member) -> None:
        # xx=True: only overwrite an existing record, never create one here
        written = self._client.set(self.member_key(member.id), json.dumps(member.to_dict()), xx=True)
        if not written:
            raise MemberNotFoundError(member.id)
        logger.debug(f"MEMBER_UPDATED [member_id={member.id}, is_active={member.is_active}, store=redis]")
