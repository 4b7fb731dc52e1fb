import pytest

from src.app.use_cases.selection import SendSorryNotificationsUseCase
from src.domain.entities import NotificationKind, SelectionEntry, SelectionState
from tests.utils.clock import HOUR, NOW


@pytest.mark.asyncio
async def test_sorry_notice_goes_to_non_selected_once(
    mock_uow, make_event, mock_notifier
):
    event = make_event(selection_processed=True, starts_at_epoch_ms=NOW + 10 * HOUR)
    mock_uow.events.get_due_for_sorry_notice.return_value = [event]
    mock_uow.selections.get_by_state.return_value = [
        SelectionEntry(event_id=event.id, uid=uid, state=SelectionState.non_selected)
        for uid in ("B", "C")
    ]

    result = await SendSorryNotificationsUseCase(mock_uow, mock_notifier).execute(now=NOW)

    assert result.is_ok()
    assert result.value.processed == [str(event.id)]
    assert event.sorry_notification_sent is True
    mock_uow.events.get_due_for_sorry_notice.assert_called_once_with(NOW, 48 * HOUR)
    mock_uow.selections.get_by_state.assert_called_once_with(
        event.id, SelectionState.non_selected
    )

    kind, event_id, recipients, _, _ = mock_notifier.send.call_args[0]
    assert kind == NotificationKind.not_selected
    assert event_id == event.id
    assert recipients == ["B", "C"]


@pytest.mark.asyncio
async def test_sorry_notice_window_is_configurable(mock_uow):
    await SendSorryNotificationsUseCase(mock_uow, notice_hours=24).execute(now=NOW)

    mock_uow.events.get_due_for_sorry_notice.assert_called_once_with(NOW, 24 * HOUR)


@pytest.mark.asyncio
async def test_failed_push_still_marks_event(mock_uow, make_event, mock_notifier):
    event = make_event(selection_processed=True)
    mock_uow.events.get_due_for_sorry_notice.return_value = [event]
    mock_uow.selections.get_by_state.return_value = [
        SelectionEntry(event_id=event.id, uid="B", state=SelectionState.non_selected)
    ]
    mock_notifier.send.side_effect = ConnectionError("push service down")

    result = await SendSorryNotificationsUseCase(mock_uow, mock_notifier).execute(now=NOW)

    assert result.is_ok()
    assert event.sorry_notification_sent is True
    mock_uow.commit.assert_called_once()
