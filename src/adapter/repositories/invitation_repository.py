from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import Invitation, InvitationStatus


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_event_and_uid(
        self, event_id: UUID, uid: str
    ) -> Optional[Invitation]:
        """Get the pending invitation for an entrant of an event"""
        stmt = select(Invitation).where(
            Invitation.event_id == event_id,
            Invitation.uid == uid,
            Invitation.status == InvitationStatus.pending,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_uid(self, uid: str, now: int) -> List[Invitation]:
        """Pending, unexpired invitations of an entrant, newest first"""
        stmt = (
            select(Invitation)
            .where(
                Invitation.uid == uid,
                Invitation.status == InvitationStatus.pending,
                or_(Invitation.expires_at.is_(None), Invitation.expires_at > now),
            )
            .order_by(Invitation.issued_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_overdue_pending(self, now: int) -> List[Invitation]:
        """Pending invitations whose deadline has been reached"""
        stmt = (
            select(Invitation)
            .where(
                Invitation.status == InvitationStatus.pending,
                Invitation.expires_at.is_not(None),
                Invitation.expires_at <= now,
            )
            .order_by(Invitation.expires_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation
