"""
Push notification port.

The lifecycle calls the notifier after its transaction has committed. Delivery
is best effort: a failing notifier is logged and never fails the operation
that triggered it.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import NotificationKind

logger = logging.getLogger(__name__)


class INotifier(ABC):
    """Sends (or queues) a push notification to a group of entrants"""

    @abstractmethod
    async def send(
        self,
        kind: NotificationKind,
        event_id: Optional[UUID],
        recipient_uids: List[str],
        title: str,
        message: str,
    ) -> None:
        pass


async def notify_quietly(
    notifier: Optional[INotifier],
    kind: NotificationKind,
    event_id: Optional[UUID],
    recipient_uids: List[str],
    title: str,
    message: str,
) -> bool:
    """Fire-and-forget send; returns whether the notifier accepted the request"""
    if notifier is None or not recipient_uids:
        return False
    try:
        await notifier.send(kind, event_id, recipient_uids, title, message)
    except Exception:
        logger.exception(
            f"Notification {kind.value} for event {event_id} "
            f"to {len(recipient_uids)} entrant(s) failed"
        )
        return False
    return True
