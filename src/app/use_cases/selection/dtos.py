"""
Selection Use Case DTOs

Command and Response classes for the draw, replacement and scheduler sweeps.
"""

from typing import List

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class ReplaceEntrantsCommand(BaseModel):
    """Command for replace entrants use case"""

    count: int
    new_deadline: int


# ============================================================================
# Response DTOs
# ============================================================================


class DrawResponse(BaseModel):
    """Outcome of the one-time lottery draw"""

    event_id: str
    selected: List[str]
    non_selected: List[str]
    invitation_ids: List[str]
    waitlist_count: int


class ReplacementFailure(BaseModel):
    uid: str
    code: str
    message: str


class ReplaceEntrantsResponse(BaseModel):
    """Per-entrant outcome of a replacement batch"""

    event_id: str
    requested: int
    promoted: List[str]
    invitation_ids: List[str]
    failures: List[ReplacementFailure]
    waitlist_count: int


class SweepFailure(BaseModel):
    id: str
    code: str
    message: str


class SweepResponse(BaseModel):
    """Summary of a scheduler sweep"""

    processed: List[str]
    failures: List[SweepFailure]
