from uuid import uuid4

import pytest

from src.app.use_cases.admissions import AdmitEntrantUseCase, GetUpcomingEventsUseCase
from src.domain.entities import AdmittedEntry, Invitation, InvitationStatus
from tests.utils.clock import DAY, NOW


@pytest.mark.asyncio
async def test_admit_removes_every_other_trace(mock_uow, make_event):
    event = make_event(capacity=5)
    mock_uow.events.get_by_id.return_value = event

    result = await AdmitEntrantUseCase(mock_uow).execute(event.id, "alice", now=NOW)

    assert result.is_ok()
    assert result.value.changed is True
    mock_uow.waitlist.delete.assert_called_once_with(event.id, "alice")
    mock_uow.selections.delete.assert_called_once_with(event.id, "alice")
    mock_uow.admissions.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_admit_closes_dangling_pending_invitation(mock_uow, make_event):
    event = make_event()
    pending = Invitation(
        id=uuid4(), event_id=event.id, uid="alice", status=InvitationStatus.pending
    )
    mock_uow.events.get_by_id.return_value = event
    mock_uow.invitations.get_pending_by_event_and_uid.return_value = pending

    result = await AdmitEntrantUseCase(mock_uow).execute(event.id, "alice", now=NOW)

    assert result.is_ok()
    assert pending.status == InvitationStatus.accepted
    assert pending.responded_at == NOW


@pytest.mark.asyncio
async def test_admit_is_idempotent(mock_uow, make_event):
    event = make_event(admitted_count=1)
    mock_uow.events.get_by_id.return_value = event
    mock_uow.admissions.get.return_value = AdmittedEntry(event_id=event.id, uid="alice")

    result = await AdmitEntrantUseCase(mock_uow).execute(event.id, "alice", now=NOW)

    assert result.is_ok()
    assert result.value.changed is False
    assert result.value.admitted_count == 1
    mock_uow.events.reserve_admission_slot.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_admit_when_full(mock_uow, make_event):
    event = make_event(capacity=1, admitted_count=1)
    mock_uow.events.get_by_id.return_value = event
    mock_uow.events.reserve_admission_slot.return_value = False

    result = await AdmitEntrantUseCase(mock_uow).execute(event.id, "bob", now=NOW)

    assert result.is_err()
    assert result.error.code == "CAPACITY_REACHED"
    mock_uow.admissions.create.assert_not_called()


@pytest.mark.asyncio
async def test_admit_by_non_organizer(mock_uow, make_event):
    event = make_event()
    mock_uow.events.get_by_id.return_value = event

    result = await AdmitEntrantUseCase(mock_uow).execute(
        event.id, "bob", organizer_uid="bob", now=NOW
    )

    assert result.is_err()
    assert result.error.code == "NOT_EVENT_ORGANIZER"


@pytest.mark.asyncio
async def test_admit_unknown_event(mock_uow):
    result = await AdmitEntrantUseCase(mock_uow).execute(uuid4(), "bob", now=NOW)

    assert result.error.code == "EVENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_upcoming_events_are_future_and_sorted(mock_uow, make_event):
    later = make_event(title="Later", starts_at_epoch_ms=NOW + 3 * DAY)
    sooner = make_event(title="Sooner", starts_at_epoch_ms=NOW + DAY)
    past = make_event(title="Past", starts_at_epoch_ms=NOW - DAY)
    mock_uow.admissions.get_by_uid.return_value = [
        AdmittedEntry(event_id=event.id, uid="alice") for event in (later, sooner, past)
    ]
    mock_uow.events.get_by_ids.return_value = [later, past, sooner]

    result = await GetUpcomingEventsUseCase(mock_uow).execute("alice", now=NOW)

    assert result.is_ok()
    assert [event.title for event in result.value.events] == ["Sooner", "Later"]


@pytest.mark.asyncio
async def test_upcoming_events_empty(mock_uow):
    result = await GetUpcomingEventsUseCase(mock_uow).execute("alice", now=NOW)

    assert result.is_ok()
    assert result.value.events == []
