"""
WaitlistEntry Entity

An entrant's presence in an event's pre-selection roster.
"""

from uuid import UUID, uuid4

from sqlalchemy import BigInteger
from sqlmodel import Column, Field, Index, SQLModel

from ..base import current_epoch_ms


class WaitlistEntry(SQLModel, table=True):
    """
    WaitlistEntry entity - one row per (event, entrant) in the roster.

    Business Rules:
    - (event_id, uid) is unique, joining twice never duplicates
    - Removed on leave, on admission, and by the draw
    """

    __tablename__ = "waitlist_entries"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    uid: str = Field(max_length=128, nullable=False, index=True)

    joined_at: int = Field(
        default_factory=current_epoch_ms, sa_column=Column(BigInteger, nullable=False)
    )

    __table_args__ = (
        Index("idx_waitlist_event_uid", "event_id", "uid", unique=True),
    )
