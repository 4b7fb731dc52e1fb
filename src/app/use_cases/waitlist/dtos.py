"""
Waitlist Use Case DTOs
"""

from pydantic import BaseModel


class WaitlistResponse(BaseModel):
    """Roster membership after a join or leave"""

    event_id: str
    uid: str
    joined: bool
    changed: bool
    waitlist_count: int
