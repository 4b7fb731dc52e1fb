from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_pending_by_event_and_uid(
        self, event_id: UUID, uid: str
    ) -> Optional[Invitation]:
        """Get the pending invitation for an entrant of an event"""
        pass

    @abstractmethod
    async def get_active_by_uid(self, uid: str, now: int) -> List[Invitation]:
        """Pending, unexpired invitations of an entrant, newest first"""
        pass

    @abstractmethod
    async def get_overdue_pending(self, now: int) -> List[Invitation]:
        """Pending invitations whose deadline has been reached"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass
