"""
Join Waitlist Use Case

Handles entrants joining an event's pre-selection roster.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.feeds import publish_waitlist_count
from src.app.services.lifecycle import record_audit
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.waitlist_count import recompute_waitlist_count
from src.domain import errors
from src.domain.base import current_epoch_ms
from src.domain.entities import WaitlistEntry

from .dtos import WaitlistResponse

logger = logging.getLogger(__name__)


class JoinWaitlistUseCase:
    """
    Use case for joining an event waitlist.

    Business Rules:
    - Admitted entrants cannot rejoin
    - Joining an existing membership is a successful no-op
    - Registration window is [registration_start, registration_end]
    - Once the draw has run the roster is frozen; the flag is re-checked
      by a conditional write on the event row, not only on the read
    - Roster size is bounded by capacity when capacity > 0
    """

    def __init__(
        self,
        uow: UnitOfWork,
        subscriptions: Optional[SubscriptionRegistry] = None,
    ):
        self.uow = uow
        self.subscriptions = subscriptions

    async def execute(
        self, event_id: UUID, uid: str, now: Optional[int] = None
    ) -> Result[WaitlistResponse]:
        """
        Execute join waitlist use case.

        Args:
            event_id: Event to join
            uid: Joining entrant
            now: Epoch milliseconds (defaults to the current time)

        Returns:
            Result with WaitlistResponse DTO, or Error
        """
        now = now if now is not None else current_epoch_ms()

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            if await self.uow.admissions.get(event_id, uid) is not None:
                return Return.err(
                    Error(
                        errors.ALREADY_ADMITTED,
                        "Entrant is already admitted to this event",
                    )
                )

            # Retry from a flaky client
            if await self.uow.waitlist.get(event_id, uid) is not None:
                return Return.ok(
                    WaitlistResponse(
                        event_id=str(event_id),
                        uid=uid,
                        joined=True,
                        changed=False,
                        waitlist_count=event.waitlist_count,
                    )
                )

            if event.selection_processed:
                return Return.err(
                    Error(
                        errors.REGISTRATION_CLOSED,
                        "Selection has already run for this event",
                    )
                )

            if now < event.registration_start:
                return Return.err(
                    Error(errors.REGISTRATION_NOT_OPEN, "Registration has not opened yet")
                )

            if now > event.registration_end:
                return Return.err(
                    Error(errors.REGISTRATION_CLOSED, "Registration has closed")
                )

            # Row write lock; a concurrent draw either commits first or waits
            if not await self.uow.events.hold_registration_open(event_id):
                return Return.err(
                    Error(
                        errors.REGISTRATION_CLOSED,
                        "Selection has already run for this event",
                    )
                )

            if event.capacity > 0:
                roster_size = await self.uow.waitlist.count_by_event_id(event_id)
                if roster_size >= event.capacity:
                    return Return.err(
                        Error(errors.CAPACITY_REACHED, "Waitlist is full")
                    )

            await self.uow.waitlist.create(
                WaitlistEntry(event_id=event_id, uid=uid, joined_at=now)
            )
            count = await recompute_waitlist_count(self.uow, event)

            await record_audit(self.uow, "waitlist_joined", event_id, uid)

            await self.uow.commit()

            logger.info(f"{uid} joined waitlist of event {event_id} ({count} waiting)")
            publish_waitlist_count(self.subscriptions, event)

            return Return.ok(
                WaitlistResponse(
                    event_id=str(event_id),
                    uid=uid,
                    joined=True,
                    changed=True,
                    waitlist_count=count,
                )
            )
