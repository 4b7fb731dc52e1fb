from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import WaitlistEntry


class IWaitlistEntryRepository(ABC):
    """Waitlist roster repository interface - application layer"""

    @abstractmethod
    async def get(self, event_id: UUID, uid: str) -> Optional[WaitlistEntry]:
        """Get roster entry by event and entrant"""
        pass

    @abstractmethod
    async def get_by_event_id(self, event_id: UUID) -> List[WaitlistEntry]:
        """Get the whole roster for an event, oldest join first"""
        pass

    @abstractmethod
    async def count_by_event_id(self, event_id: UUID) -> int:
        """Roster size"""
        pass

    @abstractmethod
    async def create(self, entry: WaitlistEntry) -> WaitlistEntry:
        """Add an entrant to the roster"""
        pass

    @abstractmethod
    async def delete(self, event_id: UUID, uid: str) -> bool:
        """Remove an entrant; False if they were not on the roster"""
        pass

    @abstractmethod
    async def delete_many(self, event_id: UUID, uids: List[str]) -> int:
        """Remove the given entrants from the roster"""
        pass
