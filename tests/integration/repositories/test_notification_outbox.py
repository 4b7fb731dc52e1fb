from uuid import uuid4

import pytest
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.notification_outbox import OutboxNotifier
from src.domain.entities import NotificationKind, NotificationRequest


@pytest.mark.asyncio
async def test_outbox_queues_request(engine, db_session):
    session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    notifier = OutboxNotifier(session_factory)
    event_id = uuid4()

    await notifier.send(
        NotificationKind.selected,
        event_id,
        ["entrant-a", "entrant-b"],
        "You've been selected!",
        "You were selected for Swim Lessons.",
    )

    result = await db_session.execute(select(NotificationRequest))
    queued = list(result.scalars().all())
    assert len(queued) == 1
    request = queued[0]
    assert request.event_id == event_id
    assert request.kind == NotificationKind.selected
    assert request.recipient_uids == ["entrant-a", "entrant-b"]
    assert request.processed is False
