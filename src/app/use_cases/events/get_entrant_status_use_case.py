"""
Get Entrant Status Use Case

Answers "am I joined / admitted / selected?" for one entrant and event.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain import errors
from src.domain.entities import EntrantState

from .dtos import EntrantStatusResponse


class GetEntrantStatusUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event_id: UUID, uid: str) -> Result[EntrantStatusResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            state = EntrantState.none
            is_joined = await self.uow.waitlist.get(event_id, uid) is not None
            is_admitted = await self.uow.admissions.get(event_id, uid) is not None

            if is_admitted:
                state = EntrantState.admitted
            elif is_joined:
                state = EntrantState.waitlisted
            else:
                entry = await self.uow.selections.get(event_id, uid)
                if entry is not None:
                    state = EntrantState(entry.state.value)

            return Return.ok(
                EntrantStatusResponse(
                    event_id=str(event_id),
                    uid=uid,
                    state=state.value,
                    is_joined=is_joined,
                    is_admitted=is_admitted,
                )
            )
