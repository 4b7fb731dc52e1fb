"""
Get Event Use Case

Event details with a waitlist count recomputed from the source tables.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.waitlist_count import compute_waitlist_count
from src.domain import errors

from .dtos import EventResponse


class GetEventUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event_id: UUID) -> Result[EventResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            count = await compute_waitlist_count(self.uow, event)
            return Return.ok(EventResponse.from_event(event, waitlist_count=count))
