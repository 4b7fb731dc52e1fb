"""
Admission Use Case DTOs
"""

from typing import List

from pydantic import BaseModel

from src.app.use_cases.events.dtos import EventResponse


class AdmitEntrantCommand(BaseModel):
    """Command for admit entrant use case"""

    uid: str


class AdmissionResponse(BaseModel):
    event_id: str
    uid: str
    admitted: bool
    changed: bool
    admitted_count: int


class UpcomingEventsResponse(BaseModel):
    uid: str
    events: List[EventResponse]
