"""
Create Event Use Case

Handles organizers creating lottery-managed events.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.lifecycle import record_audit
from src.app.services.unit_of_work import UnitOfWork
from src.domain import errors
from src.domain.base import current_epoch_ms
from src.domain.entities import Event

from .dtos import CreateEventCommand, EventResponse

MAX_TITLE_LENGTH = 80


def validate_event(
    command: CreateEventCommand, now: int, max_capacity: int
) -> Optional[str]:
    """Returns None when the event is valid, otherwise the first problem found"""
    title = (command.title or "").strip()
    if not title:
        return "Title is required"
    if len(title) > MAX_TITLE_LENGTH:
        return f"Title must be at most {MAX_TITLE_LENGTH} characters"
    if command.capacity < 0 or command.capacity > max_capacity:
        return f"Capacity must be between 0 (unlimited) and {max_capacity}"
    if command.sample_size < 1:
        return "Sample size must be at least 1"
    if command.registration_start >= command.registration_end:
        return "Registration must start before it ends"
    if command.deadline_epoch_ms < command.registration_end:
        return "Response deadline cannot be before registration ends"
    if command.starts_at_epoch_ms <= now:
        return "Start must be in the future"
    return None


class CreateEventUseCase:
    """
    Use case for creating an event.

    Business Rules:
    - Title required, at most 80 characters
    - Capacity 0 (unlimited) up to the configured maximum
    - Sample size of at least one entrant per draw
    - registration_start < registration_end <= deadline
    - Event must start in the future
    """

    def __init__(self, uow: UnitOfWork, max_capacity: int = 500):
        self.uow = uow
        self.max_capacity = max_capacity

    async def execute(
        self,
        organizer_uid: str,
        command: CreateEventCommand,
        now: Optional[int] = None,
    ) -> Result[EventResponse]:
        now = now if now is not None else current_epoch_ms()

        problem = validate_event(command, now, self.max_capacity)
        if problem is not None:
            return Return.err(Error(errors.INVALID_EVENT, problem))

        async with self.uow:
            event = Event(
                organizer_uid=organizer_uid,
                title=command.title.strip(),
                capacity=command.capacity,
                sample_size=command.sample_size,
                registration_start=command.registration_start,
                registration_end=command.registration_end,
                deadline_epoch_ms=command.deadline_epoch_ms,
                starts_at_epoch_ms=command.starts_at_epoch_ms,
                created_at_epoch_ms=now,
            )
            event = await self.uow.events.create(event)

            await record_audit(
                self.uow, "event_created", event.id, organizer_uid, title=event.title
            )

            await self.uow.commit()

            return Return.ok(EventResponse.from_event(event))
