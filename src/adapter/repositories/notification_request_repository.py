
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.notification_request_repository import (
    INotificationRequestRepository,
)
from src.domain.entities import NotificationRequest


class NotificationRequestRepository(INotificationRequestRepository):
    """Notification outbox repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, request: NotificationRequest) -> NotificationRequest:
        self.session.add(request)
        await self.session.flush()
        await self.session.refresh(request)
        return request
