"""
Notify Entrant Group Use Case

Organizer broadcast to one partition of an event's entrants.
"""

from typing import List, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notifier import INotifier, notify_quietly
from src.app.services.unit_of_work import UnitOfWork
from src.domain import errors
from src.domain.entities import EntrantState, NotificationKind, SelectionState

from .dtos import NotifyGroupResponse

NOTIFIABLE_GROUPS = (
    EntrantState.waitlisted,
    EntrantState.selected,
    EntrantState.non_selected,
    EntrantState.cancelled,
    EntrantState.admitted,
)


class NotifyEntrantGroupUseCase:
    """
    Use case for organizer messages to a group of entrants.

    Business Rules:
    - Only the event organizer can message entrants
    - Groups: waitlisted, selected, non_selected, cancelled, admitted
    - Sending is best effort; an empty group queues nothing
    """

    def __init__(self, uow: UnitOfWork, notifier: Optional[INotifier] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self,
        organizer_uid: str,
        event_id: UUID,
        group: str,
        message: str,
        title: Optional[str] = None,
    ) -> Result[NotifyGroupResponse]:
        try:
            target = EntrantState(group)
        except ValueError:
            target = None
        if target not in NOTIFIABLE_GROUPS:
            return Return.err(
                Error(
                    errors.INVALID_GROUP,
                    f"Invalid group: {group}. Must be one of: "
                    + ", ".join(g.value for g in NOTIFIABLE_GROUPS),
                )
            )

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            if event.organizer_uid != organizer_uid:
                return Return.err(
                    Error(
                        errors.NOT_EVENT_ORGANIZER,
                        "Only the event organizer can message entrants",
                    )
                )

            recipients = await self._recipients(event_id, target)
            event_title = event.title

        queued = await notify_quietly(
            self.notifier,
            NotificationKind.organizer_message,
            event_id,
            recipients,
            title or event_title,
            message,
        )
        return Return.ok(
            NotifyGroupResponse(
                group=target.value, recipient_count=len(recipients), queued=queued
            )
        )

    async def _recipients(self, event_id: UUID, group: EntrantState) -> List[str]:
        if group == EntrantState.waitlisted:
            entries = await self.uow.waitlist.get_by_event_id(event_id)
        elif group == EntrantState.admitted:
            entries = await self.uow.admissions.get_by_event_id(event_id)
        else:
            entries = await self.uow.selections.get_by_state(
                event_id, SelectionState(group.value)
            )
        return [entry.uid for entry in entries]
