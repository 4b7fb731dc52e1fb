from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.notifier import notify_quietly
from src.domain.entities import NotificationKind


@pytest.mark.asyncio
async def test_notify_quietly_sends():
    notifier = MagicMock()
    notifier.send = AsyncMock()
    event_id = uuid4()

    sent = await notify_quietly(
        notifier, NotificationKind.selected, event_id, ["A"], "Title", "Body"
    )

    assert sent is True
    notifier.send.assert_called_once_with(
        NotificationKind.selected, event_id, ["A"], "Title", "Body"
    )


@pytest.mark.asyncio
async def test_notify_quietly_swallows_notifier_errors(caplog):
    notifier = MagicMock()
    notifier.send = AsyncMock(side_effect=RuntimeError("push down"))

    sent = await notify_quietly(
        notifier, NotificationKind.replacement, uuid4(), ["A"], "Title", "Body"
    )

    assert sent is False
    assert "replacement" in caplog.text


@pytest.mark.asyncio
async def test_notify_quietly_without_recipients_or_notifier():
    notifier = MagicMock()
    notifier.send = AsyncMock()

    assert await notify_quietly(notifier, NotificationKind.selected, None, [], "t", "m") is False
    assert await notify_quietly(None, NotificationKind.selected, None, ["A"], "t", "m") is False
    notifier.send.assert_not_called()
