"""
Leave Waitlist Use Case

Handles entrants leaving an event's pre-selection roster.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.feeds import publish_waitlist_count
from src.app.services.lifecycle import record_audit
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.waitlist_count import recompute_waitlist_count
from src.domain import errors

from .dtos import WaitlistResponse


class LeaveWaitlistUseCase:
    """
    Use case for leaving an event waitlist.

    Leaving when not on the roster succeeds without changing anything.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        subscriptions: Optional[SubscriptionRegistry] = None,
    ):
        self.uow = uow
        self.subscriptions = subscriptions

    async def execute(self, event_id: UUID, uid: str) -> Result[WaitlistResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            removed = await self.uow.waitlist.delete(event_id, uid)
            if not removed:
                return Return.ok(
                    WaitlistResponse(
                        event_id=str(event_id),
                        uid=uid,
                        joined=False,
                        changed=False,
                        waitlist_count=event.waitlist_count,
                    )
                )

            count = await recompute_waitlist_count(self.uow, event)
            await record_audit(self.uow, "waitlist_left", event_id, uid)

            await self.uow.commit()

            publish_waitlist_count(self.subscriptions, event)

            return Return.ok(
                WaitlistResponse(
                    event_id=str(event_id),
                    uid=uid,
                    joined=False,
                    changed=True,
                    waitlist_count=count,
                )
            )
