from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.domain.entities import AuditEvent


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        self.session.add(audit_event)
        await self.session.flush()
        await self.session.refresh(audit_event)
        return audit_event

    async def get_by_event_id(self, event_id: UUID) -> List[AuditEvent]:
        """Audit trail of an event, oldest first"""
        stmt = (
            select(AuditEvent)
            .where(AuditEvent.event_id == event_id)
            .order_by(AuditEvent.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
