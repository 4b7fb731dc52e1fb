"""
NotificationRequest Entity

Outbox of push notifications for the external delivery worker.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from .enums import NotificationKind


class NotificationRequest(SQLModel, table=True):
    """
    NotificationRequest entity - a push the delivery worker still has to send.

    Business Rules:
    - Written after the lifecycle change it reports has committed
    - Delivery is best effort; processed is flipped by the worker
    """

    __tablename__ = "notification_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: Optional[UUID] = Field(default=None, index=True)
    kind: NotificationKind = Field(nullable=False)
    recipient_uids: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    title: str = Field(max_length=200)
    message: str = Field(max_length=1000)

    processed: bool = Field(default=False)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_notification_processed", "processed"),)
