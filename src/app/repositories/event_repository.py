from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Event


class IEventRepository(ABC):
    """Event repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, event_ids: List[UUID]) -> List[Event]:
        """Get events by IDs, ordered by start time ascending"""
        pass

    @abstractmethod
    async def get_due_for_selection(self, now: int) -> List[Event]:
        """Events whose registration has ended and whose draw has not run"""
        pass

    @abstractmethod
    async def get_due_for_sorry_notice(self, now: int, window_ms: int) -> List[Event]:
        """Processed events starting within window_ms of now without a sorry notice"""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Create a new event"""
        pass

    @abstractmethod
    async def update(self, event: Event) -> Event:
        """Update existing event"""
        pass

    @abstractmethod
    async def mark_selection_processed(self, event_id: UUID) -> bool:
        """Atomically flip selection_processed; False if it was already set"""
        pass

    @abstractmethod
    async def hold_registration_open(self, event_id: UUID) -> bool:
        """Atomically bump version while the draw has not run; False once it has"""
        pass

    @abstractmethod
    async def reserve_admission_slot(self, event_id: UUID) -> bool:
        """Atomically take one admission slot; False if the event is full"""
        pass
