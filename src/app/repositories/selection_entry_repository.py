from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import SelectionEntry, SelectionState


class ISelectionEntryRepository(ABC):
    """Post-draw partition repository interface - application layer"""

    @abstractmethod
    async def get(self, event_id: UUID, uid: str) -> Optional[SelectionEntry]:
        """Get an entrant's partition entry"""
        pass

    @abstractmethod
    async def get_by_state(
        self, event_id: UUID, state: SelectionState
    ) -> List[SelectionEntry]:
        """All entries of an event in the given state"""
        pass

    @abstractmethod
    async def count_by_state(self, event_id: UUID, state: SelectionState) -> int:
        """Number of entries of an event in the given state"""
        pass

    @abstractmethod
    async def count_selected_with_pending_invitation(self, event_id: UUID) -> int:
        """Selected entrants whose invitation is still pending"""
        pass

    @abstractmethod
    async def create_many(self, entries: List[SelectionEntry]) -> List[SelectionEntry]:
        """Write a batch of partition entries"""
        pass

    @abstractmethod
    async def update(self, entry: SelectionEntry) -> SelectionEntry:
        """Update existing entry"""
        pass

    @abstractmethod
    async def delete(self, event_id: UUID, uid: str) -> bool:
        """Remove an entrant's partition entry"""
        pass
