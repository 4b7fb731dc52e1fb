from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.event_repository import IEventRepository
from src.domain.entities import Event


class EventRepository(IEventRepository):
    """Event repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        stmt = select(Event).where(Event.id == event_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_ids(self, event_ids: List[UUID]) -> List[Event]:
        """Get events by IDs, ordered by start time ascending"""
        if not event_ids:
            return []
        stmt = (
            select(Event)
            .where(Event.id.in_(event_ids))
            .order_by(Event.starts_at_epoch_ms.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_due_for_selection(self, now: int) -> List[Event]:
        """Events whose registration has ended and whose draw has not run"""
        stmt = (
            select(Event)
            .where(
                Event.registration_end <= now,
                Event.selection_processed == False,  # noqa: E712
            )
            .order_by(Event.registration_end.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_due_for_sorry_notice(self, now: int, window_ms: int) -> List[Event]:
        """Processed events starting within window_ms of now without a sorry notice"""
        stmt = select(Event).where(
            Event.selection_processed == True,  # noqa: E712
            Event.sorry_notification_sent == False,  # noqa: E712
            Event.starts_at_epoch_ms > now,
            Event.starts_at_epoch_ms <= now + window_ms,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, event: Event) -> Event:
        """Create a new event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def update(self, event: Event) -> Event:
        """Update existing event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def mark_selection_processed(self, event_id: UUID) -> bool:
        """
        Compare-and-set on selection_processed.

        At most one caller ever sees rowcount == 1 for a given event.
        """
        stmt = (
            update(Event)
            .where(Event.id == event_id, Event.selection_processed == False)  # noqa: E712
            .values(selection_processed=True)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return False
        await self._reload(event_id)
        return True

    async def hold_registration_open(self, event_id: UUID) -> bool:
        """
        Compare-and-set on the event row for a join.

        Writes the row only while selection_processed is false, so a join and
        a draw can never both commit against the same pre-draw state.
        """
        stmt = (
            update(Event)
            .where(Event.id == event_id, Event.selection_processed == False)  # noqa: E712
            .values(version=Event.version + 1)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return False
        await self._reload(event_id)
        return True

    async def reserve_admission_slot(self, event_id: UUID) -> bool:
        """Compare-and-increment of admitted_count against capacity"""
        stmt = (
            update(Event)
            .where(
                Event.id == event_id,
                or_(Event.capacity <= 0, Event.admitted_count < Event.capacity),
            )
            .values(admitted_count=Event.admitted_count + 1)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return False
        await self._reload(event_id)
        return True

    async def _reload(self, event_id: UUID) -> None:
        stmt = (
            select(Event)
            .where(Event.id == event_id)
            .execution_options(populate_existing=True)
        )
        await self.session.execute(stmt)
