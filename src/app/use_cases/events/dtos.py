"""
Event Use Case DTOs (Data Transfer Objects)

All Command and Response classes for event domain.
Provides type safety and clear contracts between layers.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Event


# ============================================================================
# Command DTOs
# ============================================================================


class CreateEventCommand(BaseModel):
    """Command for create event use case"""

    title: str
    capacity: int = 0
    sample_size: int = 1
    registration_start: int
    registration_end: int
    deadline_epoch_ms: int
    starts_at_epoch_ms: int


# ============================================================================
# Response DTOs
# ============================================================================


class EventResponse(BaseModel):
    """Event details, with the waitlist count recomputed at read time"""

    id: str
    organizer_uid: str
    title: str
    capacity: int
    sample_size: int
    registration_start: int
    registration_end: int
    deadline_epoch_ms: int
    starts_at_epoch_ms: int
    selection_processed: bool
    waitlist_count: int
    admitted_count: int

    @classmethod
    def from_event(cls, event: Event, waitlist_count: Optional[int] = None):
        return cls(
            id=str(event.id),
            organizer_uid=event.organizer_uid,
            title=event.title,
            capacity=event.capacity,
            sample_size=event.sample_size,
            registration_start=event.registration_start,
            registration_end=event.registration_end,
            deadline_epoch_ms=event.deadline_epoch_ms,
            starts_at_epoch_ms=event.starts_at_epoch_ms,
            selection_processed=event.selection_processed,
            waitlist_count=(
                event.waitlist_count if waitlist_count is None else waitlist_count
            ),
            admitted_count=event.admitted_count,
        )


class EventEntrantsResponse(BaseModel):
    """Every entrant of an event, grouped by lifecycle partition"""

    event_id: str
    waitlisted: List[str]
    selected: List[str]
    non_selected: List[str]
    cancelled: List[str]
    admitted: List[str]


class EntrantStatusResponse(BaseModel):
    """Where the calling entrant sits in an event's lifecycle"""

    event_id: str
    uid: str
    state: str
    is_joined: bool
    is_admitted: bool


class NotifyGroupResponse(BaseModel):
    """Response for notify entrant group use case"""

    group: str
    recipient_count: int
    queued: bool
