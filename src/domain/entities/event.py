"""
Event Entity

Event definition plus the derived counters the lifecycle maintains.
"""

from uuid import UUID, uuid4

from sqlalchemy import BigInteger
from sqlmodel import Column, Field, Index, SQLModel

from ..base import current_epoch_ms


class Event(SQLModel, table=True):
    """
    Event entity - an organizer's event with a lottery-managed waitlist.

    Business Rules:
    - capacity <= 0 means unlimited admissions
    - selection_processed flips false -> true exactly once (the draw)
    - waitlist_count is a cache of the projector formula, never trusted
    - admitted_count is the slot counter used for atomic capacity checks
    - version increases on every waitlist_count write
    """

    __tablename__ = "events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organizer_uid: str = Field(max_length=128, nullable=False, index=True)
    title: str = Field(max_length=80, nullable=False)

    capacity: int = Field(default=0)
    sample_size: int = Field(default=1)

    # Epoch milliseconds
    registration_start: int = Field(sa_column=Column(BigInteger, nullable=False))
    registration_end: int = Field(sa_column=Column(BigInteger, nullable=False))
    deadline_epoch_ms: int = Field(sa_column=Column(BigInteger, nullable=False))
    starts_at_epoch_ms: int = Field(sa_column=Column(BigInteger, nullable=False))

    selection_processed: bool = Field(default=False)
    sorry_notification_sent: bool = Field(default=False)

    waitlist_count: int = Field(default=0)
    admitted_count: int = Field(default=0)
    version: int = Field(default=0)

    created_at_epoch_ms: int = Field(
        default_factory=current_epoch_ms, sa_column=Column(BigInteger, nullable=False)
    )

    __table_args__ = (
        Index("idx_event_registration_end", "registration_end", "selection_processed"),
        Index("idx_event_starts_at", "starts_at_epoch_ms"),
    )
