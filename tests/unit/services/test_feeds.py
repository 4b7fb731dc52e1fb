from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from src.app.services.feeds import (
    listen_active_invitations,
    listen_waitlist_count,
    publish_active_invitations,
    publish_waitlist_count,
)
from src.app.services.subscriptions import SubscriptionRegistry
from src.domain.entities import Invitation, InvitationStatus
from tests.utils.clock import NOW


@pytest.mark.asyncio
async def test_listen_waitlist_count_gets_live_value_then_updates(mock_uow, make_event):
    event = make_event(waitlist_count=99)
    mock_uow.events.get_by_id.return_value = event
    mock_uow.waitlist.count_by_event_id.return_value = 2
    registry = SubscriptionRegistry()
    listener = MagicMock()

    subscription = await listen_waitlist_count(mock_uow, registry, event.id, listener)

    listener.assert_called_once_with(2)

    event.waitlist_count = 3
    event.version = 1
    publish_waitlist_count(registry, event)
    listener.assert_called_with(3)

    subscription.remove()
    event.waitlist_count = 4
    event.version = 2
    publish_waitlist_count(registry, event)
    assert listener.call_count == 2


@pytest.mark.asyncio
async def test_listen_waitlist_count_unknown_event(mock_uow):
    subscription = await listen_waitlist_count(
        mock_uow, SubscriptionRegistry(), uuid4(), MagicMock()
    )

    assert subscription is None


@pytest.mark.asyncio
async def test_active_invitations_feed(mock_uow):
    invitation = Invitation(
        id=uuid4(), event_id=uuid4(), uid="alice", status=InvitationStatus.pending
    )
    registry = SubscriptionRegistry()
    listener = MagicMock()

    await listen_active_invitations(mock_uow, registry, "alice", listener, now=NOW)
    listener.assert_called_once_with([])

    mock_uow.invitations.get_active_by_uid.return_value = [invitation]
    await publish_active_invitations(registry, mock_uow, "alice", NOW)

    listener.assert_called_with([invitation])
    mock_uow.invitations.get_active_by_uid.assert_called_with("alice", NOW)


@pytest.mark.asyncio
async def test_active_invitations_skips_query_without_listeners(mock_uow):
    await publish_active_invitations(SubscriptionRegistry(), mock_uow, "alice", NOW)

    mock_uow.invitations.get_active_by_uid.assert_not_called()
