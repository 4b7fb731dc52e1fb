"""
Selection Use Cases

The lottery draw, organizer replacements and the scheduler sweeps around them.
"""

from .draw_selection_use_case import DrawSelectionUseCase
from .dtos import (
    DrawResponse,
    ReplaceEntrantsCommand,
    ReplaceEntrantsResponse,
    ReplacementFailure,
    SweepFailure,
    SweepResponse,
)
from .process_due_selections_use_case import ProcessDueSelectionsUseCase
from .replace_entrants_use_case import ReplaceEntrantsUseCase
from .send_sorry_notifications_use_case import SendSorryNotificationsUseCase

__all__ = [
    "DrawSelectionUseCase",
    "ReplaceEntrantsUseCase",
    "ProcessDueSelectionsUseCase",
    "SendSorryNotificationsUseCase",
    "DrawResponse",
    "ReplaceEntrantsCommand",
    "ReplaceEntrantsResponse",
    "ReplacementFailure",
    "SweepFailure",
    "SweepResponse",
]
