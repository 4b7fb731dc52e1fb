from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.admitted_entry_repository import AdmittedEntryRepository
from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.event_repository import EventRepository
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.selection_entry_repository import SelectionEntryRepository
from src.adapter.repositories.waitlist_entry_repository import WaitlistEntryRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.events = EventRepository(self.session)
        self.waitlist = WaitlistEntryRepository(self.session)
        self.selections = SelectionEntryRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.admissions = AdmittedEntryRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
