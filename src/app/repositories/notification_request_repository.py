from abc import ABC, abstractmethod

from src.domain.entities import NotificationRequest


class INotificationRequestRepository(ABC):
    """Notification outbox repository interface - application layer"""

    @abstractmethod
    async def create(self, request: NotificationRequest) -> NotificationRequest:
        """Queue a notification request"""
        pass
