"""
SelectionEntry Entity

Post-draw partition membership: selected, non-selected or cancelled.
"""

from uuid import UUID, uuid4

from sqlalchemy import BigInteger
from sqlmodel import Column, Field, Index, SQLModel

from ..base import current_epoch_ms
from .enums import SelectionState


class SelectionEntry(SQLModel, table=True):
    """
    SelectionEntry entity - where a drawn-over entrant sits after the draw.

    Business Rules:
    - Created only by the draw, one per roster member in the snapshot
    - non_selected -> selected only through replacement
    - cancelled is terminal, never a replacement candidate again
    - Deleted on admission (AdmittedEntry takes over)
    """

    __tablename__ = "selection_entries"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    uid: str = Field(max_length=128, nullable=False, index=True)

    state: SelectionState = Field(nullable=False)

    updated_at: int = Field(
        default_factory=current_epoch_ms, sa_column=Column(BigInteger, nullable=False)
    )

    __table_args__ = (
        Index("idx_selection_event_uid", "event_id", "uid", unique=True),
        Index("idx_selection_event_state", "event_id", "state"),
    )
