"""
Invitation Entity

Offer of admission to a selected entrant, with a response deadline.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import BigInteger, text
from sqlmodel import Column, Field, Index, SQLModel

from ..base import current_epoch_ms
from .enums import InvitationStatus


class Invitation(SQLModel, table=True):
    """
    Invitation entity - offer of a spot to a selected entrant.

    Business Rules:
    - Issued by the draw or by a replacement
    - At most one pending invitation per (event_id, uid)
    - accepted / declined / expired are terminal
    - Expired once now >= expires_at while still pending
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    uid: str = Field(max_length=128, nullable=False, index=True)

    status: InvitationStatus = Field(default=InvitationStatus.pending)
    is_replacement: bool = Field(default=False)

    # Epoch milliseconds
    issued_at: int = Field(
        default_factory=current_epoch_ms, sa_column=Column(BigInteger, nullable=False)
    )
    expires_at: Optional[int] = Field(default=None, sa_column=Column(BigInteger))
    responded_at: Optional[int] = Field(default=None, sa_column=Column(BigInteger))

    __table_args__ = (
        Index(
            "uq_invitation_pending_event_uid",
            "event_id",
            "uid",
            unique=True,
            sqlite_where=text("status = 'pending'"),
            postgresql_where=text("status = 'pending'"),
        ),
        Index("idx_invitation_status_expires", "status", "expires_at"),
    )


def is_expired(invitation: Invitation, now: int) -> bool:
    """A pending invitation whose deadline has been reached"""
    return (
        invitation.status == InvitationStatus.pending
        and invitation.expires_at is not None
        and now >= invitation.expires_at
    )
