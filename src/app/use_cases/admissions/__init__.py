"""
Admission Ledger Use Cases
"""

from .admit_entrant_use_case import AdmitEntrantUseCase
from .dtos import AdmissionResponse, AdmitEntrantCommand, UpcomingEventsResponse
from .get_upcoming_events_use_case import GetUpcomingEventsUseCase

__all__ = [
    "AdmitEntrantUseCase",
    "GetUpcomingEventsUseCase",
    "AdmitEntrantCommand",
    "AdmissionResponse",
    "UpcomingEventsResponse",
]
