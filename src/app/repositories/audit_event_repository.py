from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """AuditEvent repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        pass

    @abstractmethod
    async def get_by_event_id(self, event_id: UUID) -> List[AuditEvent]:
        """Audit trail of an event, oldest first"""
        pass
