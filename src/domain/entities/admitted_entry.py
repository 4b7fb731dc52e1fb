"""
AdmittedEntry Entity

Final confirmed participation in an event.
"""

from uuid import UUID, uuid4

from sqlalchemy import BigInteger
from sqlmodel import Column, Field, Index, SQLModel

from ..base import current_epoch_ms


class AdmittedEntry(SQLModel, table=True):
    """
    AdmittedEntry entity - an entrant who holds a spot.

    Business Rules:
    - Created by accepting an invitation or by direct admission
    - Counts toward Event.capacity when capacity > 0
    - Source of truth for an entrant's upcoming events
    """

    __tablename__ = "admitted_entries"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    uid: str = Field(max_length=128, nullable=False, index=True)

    admitted_at: int = Field(
        default_factory=current_epoch_ms, sa_column=Column(BigInteger, nullable=False)
    )

    __table_args__ = (
        Index("idx_admitted_event_uid", "event_id", "uid", unique=True),
    )
