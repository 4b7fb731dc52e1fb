from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.waitlist_entry_repository import IWaitlistEntryRepository
from src.domain.entities import WaitlistEntry


class WaitlistEntryRepository(IWaitlistEntryRepository):
    """Waitlist roster repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, event_id: UUID, uid: str) -> Optional[WaitlistEntry]:
        stmt = select(WaitlistEntry).where(
            WaitlistEntry.event_id == event_id, WaitlistEntry.uid == uid
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_event_id(self, event_id: UUID) -> List[WaitlistEntry]:
        stmt = (
            select(WaitlistEntry)
            .where(WaitlistEntry.event_id == event_id)
            .order_by(WaitlistEntry.joined_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_event_id(self, event_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(WaitlistEntry)
            .where(WaitlistEntry.event_id == event_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, entry: WaitlistEntry) -> WaitlistEntry:
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def delete(self, event_id: UUID, uid: str) -> bool:
        stmt = (
            delete(WaitlistEntry)
            .where(WaitlistEntry.event_id == event_id, WaitlistEntry.uid == uid)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def delete_many(self, event_id: UUID, uids: List[str]) -> int:
        if not uids:
            return 0
        stmt = (
            delete(WaitlistEntry)
            .where(WaitlistEntry.event_id == event_id, WaitlistEntry.uid.in_(uids))
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount
