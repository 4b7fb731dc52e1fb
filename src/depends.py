from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.notification_outbox import OutboxNotifier
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.services.notifier import INotifier
from src.app.services.subscriptions import SubscriptionRegistry
from src.domain import errors

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notifier() -> INotifier:
    return OutboxNotifier(AsyncSessionLocal)


def get_subscriptions(request: Request) -> SubscriptionRegistry:
    return request.app.state.subscriptions


async def get_current_uid(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Dependency to extract and verify the JWT from the Authorization header.

    Returns:
        uid claim of the token

    Raises:
        ClientError: 401 NOT_AUTHENTICATED if the token is missing, invalid or expired
    """
    payload = verify_jwt(credentials.credentials) if credentials else None

    if payload is None or not payload.get("uid"):
        raise ClientError(
            Error(errors.NOT_AUTHENTICATED, "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return payload["uid"]
