"""
Collaborator implementations for the membership services.
"""

from app.adapters.member_store import InMemoryMemberStore
from app.adapters.redis_store import RedisMemberStore
from app.adapters.payments import InMemoryPaymentLedger
from app.adapters.notifier import LoggingNotifier

__all__ = [
    "InMemoryMemberStore",
    "RedisMemberStore",
    "InMemoryPaymentLedger",
    "LoggingNotifier",
]
