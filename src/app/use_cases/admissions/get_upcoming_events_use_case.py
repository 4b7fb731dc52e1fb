"""
Get Upcoming Events Use Case

Events an entrant is admitted to that have not started yet.
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import current_epoch_ms

from ..events.dtos import EventResponse
from .dtos import UpcomingEventsResponse


class GetUpcomingEventsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, uid: str, now: Optional[int] = None
    ) -> Result[UpcomingEventsResponse]:
        now = now if now is not None else current_epoch_ms()

        async with self.uow:
            admissions = await self.uow.admissions.get_by_uid(uid)
            events = await self.uow.events.get_by_ids(
                [entry.event_id for entry in admissions]
            )

            # Ascending by start time
            upcoming = sorted(
                (event for event in events if event.starts_at_epoch_ms > now),
                key=lambda event: event.starts_at_epoch_ms,
            )
            return Return.ok(
                UpcomingEventsResponse(
                    uid=uid,
                    events=[EventResponse.from_event(event) for event in upcoming],
                )
            )
