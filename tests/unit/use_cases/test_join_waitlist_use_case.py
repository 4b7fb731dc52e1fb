from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from src.app.services.subscriptions import SubscriptionRegistry, waitlist_count_key
from src.app.use_cases.waitlist import JoinWaitlistUseCase
from src.domain.entities import AdmittedEntry, WaitlistEntry
from tests.utils.clock import HOUR, NOW


@pytest.mark.asyncio
async def test_join_adds_entrant_and_recomputes_count(mock_uow, make_event):
    event = make_event()
    mock_uow.events.get_by_id.return_value = event
    mock_uow.waitlist.count_by_event_id.return_value = 1

    result = await JoinWaitlistUseCase(mock_uow).execute(event.id, "alice", now=NOW)

    assert result.is_ok()
    assert result.value.joined is True
    assert result.value.changed is True
    assert result.value.waitlist_count == 1
    assert event.waitlist_count == 1
    assert event.version == 1

    created = mock_uow.waitlist.create.call_args[0][0]
    assert created.event_id == event.id
    assert created.uid == "alice"
    assert created.joined_at == NOW
    mock_uow.commit.assert_called_once()
    assert mock_uow.audit_events.create.call_args[0][0].action == "waitlist_joined"


@pytest.mark.asyncio
async def test_join_twice_is_noop_success(mock_uow, make_event):
    event = make_event(waitlist_count=1)
    mock_uow.events.get_by_id.return_value = event
    mock_uow.waitlist.get.return_value = WaitlistEntry(event_id=event.id, uid="alice")

    result = await JoinWaitlistUseCase(mock_uow).execute(event.id, "alice", now=NOW)

    assert result.is_ok()
    assert result.value.changed is False
    assert result.value.waitlist_count == 1
    mock_uow.waitlist.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_join_unknown_event(mock_uow):
    result = await JoinWaitlistUseCase(mock_uow).execute(uuid4(), "alice", now=NOW)

    assert result.is_err()
    assert result.error.code == "EVENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_join_rejected_when_already_admitted(mock_uow, make_event):
    event = make_event()
    mock_uow.events.get_by_id.return_value = event
    mock_uow.admissions.get.return_value = AdmittedEntry(event_id=event.id, uid="alice")

    result = await JoinWaitlistUseCase(mock_uow).execute(event.id, "alice", now=NOW)

    assert result.is_err()
    assert result.error.code == "ALREADY_ADMITTED"
    mock_uow.waitlist.create.assert_not_called()


@pytest.mark.asyncio
async def test_join_before_registration_opens(mock_uow, make_event):
    event = make_event(registration_start=NOW + HOUR, registration_end=NOW + 2 * HOUR)
    mock_uow.events.get_by_id.return_value = event

    result = await JoinWaitlistUseCase(mock_uow).execute(event.id, "alice", now=NOW)

    assert result.is_err()
    assert result.error.code == "REGISTRATION_NOT_OPEN"


@pytest.mark.asyncio
async def test_join_after_registration_end(mock_uow, make_event):
    event = make_event(registration_start=NOW - 2 * HOUR, registration_end=NOW - 1)
    mock_uow.events.get_by_id.return_value = event

    result = await JoinWaitlistUseCase(mock_uow).execute(event.id, "alice", now=NOW)

    assert result.is_err()
    assert result.error.code == "REGISTRATION_CLOSED"
    mock_uow.waitlist.create.assert_not_called()


@pytest.mark.asyncio
async def test_join_window_bounds_are_inclusive(mock_uow, make_event):
    event = make_event(registration_start=NOW, registration_end=NOW)
    mock_uow.events.get_by_id.return_value = event

    result = await JoinWaitlistUseCase(mock_uow).execute(event.id, "alice", now=NOW)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_join_after_draw_is_closed(mock_uow, make_event):
    event = make_event(selection_processed=True)
    mock_uow.events.get_by_id.return_value = event

    result = await JoinWaitlistUseCase(mock_uow).execute(event.id, "alice", now=NOW)

    assert result.is_err()
    assert result.error.code == "REGISTRATION_CLOSED"


@pytest.mark.asyncio
async def test_join_rejected_when_roster_full(mock_uow, make_event):
    event = make_event(capacity=2)
    mock_uow.events.get_by_id.return_value = event
    mock_uow.waitlist.count_by_event_id.return_value = 2

    result = await JoinWaitlistUseCase(mock_uow).execute(event.id, "carol", now=NOW)

    assert result.is_err()
    assert result.error.code == "CAPACITY_REACHED"


@pytest.mark.asyncio
async def test_unlimited_capacity_skips_roster_check(mock_uow, make_event):
    event = make_event(capacity=0)
    mock_uow.events.get_by_id.return_value = event
    mock_uow.waitlist.count_by_event_id.return_value = 10_000

    result = await JoinWaitlistUseCase(mock_uow).execute(event.id, "carol", now=NOW)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_join_publishes_new_count(mock_uow, make_event):
    event = make_event()
    mock_uow.events.get_by_id.return_value = event
    mock_uow.waitlist.count_by_event_id.return_value = 3

    registry = SubscriptionRegistry()
    listener = MagicMock()
    registry.subscribe(waitlist_count_key(event.id), listener, 2, version=0)

    await JoinWaitlistUseCase(mock_uow, registry).execute(event.id, "dave", now=NOW)

    assert listener.call_args_list[-1][0][0] == 3


@pytest.mark.asyncio
async def test_join_loses_to_a_draw_committed_after_the_read(mock_uow, make_event):
    # The event row still reads as undrawn, but the conditional write fails
    event = make_event()
    mock_uow.events.get_by_id.return_value = event
    mock_uow.events.hold_registration_open.return_value = False

    result = await JoinWaitlistUseCase(mock_uow).execute(event.id, "late", now=NOW)

    assert result.is_err()
    assert result.error.code == "REGISTRATION_CLOSED"
    mock_uow.events.hold_registration_open.assert_called_once_with(event.id)
    mock_uow.waitlist.create.assert_not_called()
    mock_uow.events.update.assert_not_called()
    mock_uow.commit.assert_not_called()
