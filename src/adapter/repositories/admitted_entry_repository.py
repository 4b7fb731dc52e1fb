from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.admitted_entry_repository import IAdmittedEntryRepository
from src.domain.entities import AdmittedEntry


class AdmittedEntryRepository(IAdmittedEntryRepository):
    """Admission repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, event_id: UUID, uid: str) -> Optional[AdmittedEntry]:
        stmt = select(AdmittedEntry).where(
            AdmittedEntry.event_id == event_id, AdmittedEntry.uid == uid
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_event_id(self, event_id: UUID) -> List[AdmittedEntry]:
        stmt = (
            select(AdmittedEntry)
            .where(AdmittedEntry.event_id == event_id)
            .order_by(AdmittedEntry.admitted_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_uid(self, uid: str) -> List[AdmittedEntry]:
        stmt = select(AdmittedEntry).where(AdmittedEntry.uid == uid)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, entry: AdmittedEntry) -> AdmittedEntry:
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry
