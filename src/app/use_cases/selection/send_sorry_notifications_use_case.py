"""
Send Sorry Notifications Use Case

Tells non-selected entrants, shortly before an event starts, that they were
not picked.
"""

import logging
from typing import Optional

from libs.result import Result, Return
from src.app.services.lifecycle import record_audit
from src.app.services.notifier import INotifier, notify_quietly
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import current_epoch_ms
from src.domain.entities import NotificationKind, SelectionState

from .dtos import SweepResponse

logger = logging.getLogger(__name__)

HOUR_MS = 60 * 60 * 1000


class SendSorryNotificationsUseCase:
    """
    Use case for the pre-event "sorry" sweep.

    Business Rules:
    - Only events whose draw has run and that start within the notice
      window (default 48 hours)
    - Sent at most once per event (sorry_notification_sent)
    - Non-selected entrants keep their state; this is a message only
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: Optional[INotifier] = None,
        notice_hours: int = 48,
    ):
        self.uow = uow
        self.notifier = notifier
        self.window_ms = notice_hours * HOUR_MS

    async def execute(self, now: Optional[int] = None) -> Result[SweepResponse]:
        now = now if now is not None else current_epoch_ms()

        processed = []
        async with self.uow:
            due = await self.uow.events.get_due_for_sorry_notice(now, self.window_ms)

            for event in due:
                entries = await self.uow.selections.get_by_state(
                    event.id, SelectionState.non_selected
                )
                recipients = [entry.uid for entry in entries]

                event.sorry_notification_sent = True
                await self.uow.events.update(event)
                await record_audit(
                    self.uow,
                    "sorry_notification_sent",
                    event.id,
                    recipient_count=len(recipients),
                )
                await self.uow.commit()

                await notify_quietly(
                    self.notifier,
                    NotificationKind.not_selected,
                    event.id,
                    recipients,
                    "Thank you for your interest",
                    f"Thank you for joining the waitlist for {event.title}. "
                    "Unfortunately you were not selected this time.",
                )
                processed.append(str(event.id))

        if processed:
            logger.info(f"Sorry notices sent for {len(processed)} event(s)")
        return Return.ok(SweepResponse(processed=processed, failures=[]))
