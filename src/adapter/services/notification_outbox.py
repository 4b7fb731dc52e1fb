import logging
from typing import List, Optional
from uuid import UUID

from src.adapter.repositories.notification_request_repository import (
    NotificationRequestRepository,
)
from src.app.services.notifier import INotifier
from src.domain.entities import NotificationKind, NotificationRequest

logger = logging.getLogger(__name__)


class OutboxNotifier(INotifier):
    """
    Queues notifications in the notification_requests table.

    Uses its own session so an outbox write can never touch the lifecycle
    transaction that produced it. The push worker reads unprocessed rows.
    """

    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def send(
        self,
        kind: NotificationKind,
        event_id: Optional[UUID],
        recipient_uids: List[str],
        title: str,
        message: str,
    ) -> None:
        async with self.session_factory() as session:
            repository = NotificationRequestRepository(session)
            await repository.create(
                NotificationRequest(
                    event_id=event_id,
                    kind=kind,
                    recipient_uids=list(recipient_uids),
                    title=title,
                    message=message,
                )
            )
            await session.commit()
        logger.info(
            f"Queued {kind.value} notification for event {event_id} "
            f"to {len(recipient_uids)} entrant(s)"
        )
