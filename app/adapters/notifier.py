"""
Logging notifier.

Writes every notification to the application log instead of a delivery
channel, and keeps what was sent in memory.
"""

import logging
from typing import List, Tuple

from app.services.memberships.interfaces import Notifier

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    """Notifier that logs messages and records them in sent"""

    def __init__(self):
        self.sent: List[Tuple[str, int]] = []

    def send_notification(self, message: str, member_id: int) -> None:
        self.sent.append((message, member_id))
        logger.info(f"NOTIFICATION_SENT [member_id={member_id}, message={message!r}]")

    def reset(self) -> None:
        self.sent.clear()
