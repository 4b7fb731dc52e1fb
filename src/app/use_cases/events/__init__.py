"""
Event Management Use Cases

Event creation, lookup and organizer tooling.
"""

from .create_event_use_case import CreateEventUseCase, validate_event
from .dtos import (
    CreateEventCommand,
    EntrantStatusResponse,
    EventEntrantsResponse,
    EventResponse,
    NotifyGroupResponse,
)
from .get_entrant_status_use_case import GetEntrantStatusUseCase
from .get_event_entrants_use_case import GetEventEntrantsUseCase
from .get_event_use_case import GetEventUseCase
from .notify_entrant_group_use_case import NotifyEntrantGroupUseCase

__all__ = [
    "CreateEventUseCase",
    "GetEventUseCase",
    "GetEventEntrantsUseCase",
    "GetEntrantStatusUseCase",
    "NotifyEntrantGroupUseCase",
    "CreateEventCommand",
    "EventResponse",
    "EventEntrantsResponse",
    "EntrantStatusResponse",
    "NotifyGroupResponse",
    "validate_event",
]
