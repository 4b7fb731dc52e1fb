from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import AdmittedEntry


class IAdmittedEntryRepository(ABC):
    """Admission repository interface - application layer"""

    @abstractmethod
    async def get(self, event_id: UUID, uid: str) -> Optional[AdmittedEntry]:
        """Get admission by event and entrant"""
        pass

    @abstractmethod
    async def get_by_event_id(self, event_id: UUID) -> List[AdmittedEntry]:
        """All admissions for an event"""
        pass

    @abstractmethod
    async def get_by_uid(self, uid: str) -> List[AdmittedEntry]:
        """All admissions held by an entrant"""
        pass

    @abstractmethod
    async def create(self, entry: AdmittedEntry) -> AdmittedEntry:
        """Create a new admission"""
        pass
