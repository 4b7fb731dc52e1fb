from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.selection_entry_repository import ISelectionEntryRepository
from src.domain.entities import (
    Invitation,
    InvitationStatus,
    SelectionEntry,
    SelectionState,
)


class SelectionEntryRepository(ISelectionEntryRepository):
    """Post-draw partition repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, event_id: UUID, uid: str) -> Optional[SelectionEntry]:
        stmt = select(SelectionEntry).where(
            SelectionEntry.event_id == event_id, SelectionEntry.uid == uid
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_state(
        self, event_id: UUID, state: SelectionState
    ) -> List[SelectionEntry]:
        stmt = (
            select(SelectionEntry)
            .where(SelectionEntry.event_id == event_id, SelectionEntry.state == state)
            .order_by(SelectionEntry.uid.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_state(self, event_id: UUID, state: SelectionState) -> int:
        stmt = (
            select(func.count())
            .select_from(SelectionEntry)
            .where(SelectionEntry.event_id == event_id, SelectionEntry.state == state)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_selected_with_pending_invitation(self, event_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(SelectionEntry)
            .join(
                Invitation,
                and_(
                    Invitation.event_id == SelectionEntry.event_id,
                    Invitation.uid == SelectionEntry.uid,
                ),
            )
            .where(
                SelectionEntry.event_id == event_id,
                SelectionEntry.state == SelectionState.selected,
                Invitation.status == InvitationStatus.pending,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create_many(self, entries: List[SelectionEntry]) -> List[SelectionEntry]:
        self.session.add_all(entries)
        await self.session.flush()
        return entries

    async def update(self, entry: SelectionEntry) -> SelectionEntry:
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def delete(self, event_id: UUID, uid: str) -> bool:
        stmt = (
            delete(SelectionEntry)
            .where(SelectionEntry.event_id == event_id, SelectionEntry.uid == uid)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
