"""
Get Event Entrants Use Case

Organizer view of every entrant, grouped by partition.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain import errors
from src.domain.entities import SelectionState

from .dtos import EventEntrantsResponse


class GetEventEntrantsUseCase:
    """
    Use case for listing an event's entrants.

    Business Rules:
    - Only the event's organizer may see the partition
    - The five groups are disjoint
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, organizer_uid: str, event_id: UUID
    ) -> Result[EventEntrantsResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            if event.organizer_uid != organizer_uid:
                return Return.err(
                    Error(
                        errors.NOT_EVENT_ORGANIZER,
                        "Only the event organizer can view entrants",
                    )
                )

            roster = await self.uow.waitlist.get_by_event_id(event_id)
            selected = await self.uow.selections.get_by_state(
                event_id, SelectionState.selected
            )
            non_selected = await self.uow.selections.get_by_state(
                event_id, SelectionState.non_selected
            )
            cancelled = await self.uow.selections.get_by_state(
                event_id, SelectionState.cancelled
            )
            admitted = await self.uow.admissions.get_by_event_id(event_id)

            return Return.ok(
                EventEntrantsResponse(
                    event_id=str(event_id),
                    waitlisted=[entry.uid for entry in roster],
                    selected=[entry.uid for entry in selected],
                    non_selected=[entry.uid for entry in non_selected],
                    cancelled=[entry.uid for entry in cancelled],
                    admitted=[entry.uid for entry in admitted],
                )
            )
