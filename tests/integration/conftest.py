from typing import List
from uuid import UUID

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from src.depends import get_notifier, get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import generate_jwt
from src.app.services.notifier import INotifier
from src.domain.entities import NotificationKind
from tests.utils.clock import DAY, HOUR, wall_clock_ms


class RecordingNotifier(INotifier):
    def __init__(self):
        self.sent = []

    async def send(
        self,
        kind: NotificationKind,
        event_id: UUID,
        recipient_uids: List[str],
        title: str,
        message: str,
    ) -> None:
        self.sent.append(
            {
                "kind": kind,
                "event_id": event_id,
                "recipient_uids": list(recipient_uids),
                "title": title,
                "message": message,
            }
        )


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def notifier():
    return RecordingNotifier()


@pytest_asyncio.fixture
async def app(db_session, notifier):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notifier] = lambda: notifier

    return app


@pytest_asyncio.fixture
async def client(app):
    from httpx import ASGITransport

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def auth():
    def _auth(uid: str) -> dict:
        return {"Authorization": f"Bearer {generate_jwt(uid)}"}

    return _auth


@pytest_asyncio.fixture
def admin_headers():
    from config import ApplicationConfig

    return {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest_asyncio.fixture
def event_payload(test_data):
    """Event payload with an open registration window around the wall clock"""

    def _payload(name: str = "open_event", **overrides) -> dict:
        now = wall_clock_ms()
        payload = test_data.event_template(name)
        payload.update(
            registration_start=now - HOUR,
            registration_end=now + HOUR,
            deadline_epoch_ms=now + DAY,
            starts_at_epoch_ms=now + 7 * DAY,
        )
        payload.update(overrides)
        return payload

    return _payload


@pytest_asyncio.fixture
def create_event(client, auth, event_payload):
    async def _create_event(organizer: str = "organizer-1", **overrides) -> dict:
        response = await client.post(
            "/events", json=event_payload(**overrides), headers=auth(organizer)
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create_event
