"""
AuditEvent Entity

Immutable log of waitlist lifecycle transitions.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of lifecycle transitions.

    Business Rules:
    - Immutable (never updated or deleted)
    - uid is nullable for event-wide actions (draw, replacement batch)
    - Metadata stores additional context (counts, invitation ids)
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: Optional[UUID] = Field(default=None, index=True)
    uid: Optional[str] = Field(default=None, max_length=128, index=True)

    action: str = Field(max_length=100)  # e.g., "waitlist_joined", "selection_drawn"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_event_action", "event_id", "action"),
    )
