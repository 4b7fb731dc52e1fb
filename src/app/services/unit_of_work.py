from abc import ABC, abstractmethod

from src.app.repositories.admitted_entry_repository import IAdmittedEntryRepository
from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.event_repository import IEventRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.selection_entry_repository import ISelectionEntryRepository
from src.app.repositories.waitlist_entry_repository import IWaitlistEntryRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    events: IEventRepository
    waitlist: IWaitlistEntryRepository
    selections: ISelectionEntryRepository
    invitations: IInvitationRepository
    admissions: IAdmittedEntryRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
