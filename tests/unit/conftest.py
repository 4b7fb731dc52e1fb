import random
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.domain.entities import Event
from tests.utils.clock import HOUR, NOW


def _returns_argument(entity):
    return entity


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.events = MagicMock()
    uow.events.get_by_id = AsyncMock(return_value=None)
    uow.events.get_by_ids = AsyncMock(return_value=[])
    uow.events.get_due_for_selection = AsyncMock(return_value=[])
    uow.events.get_due_for_sorry_notice = AsyncMock(return_value=[])
    uow.events.create = AsyncMock(side_effect=_returns_argument)
    uow.events.update = AsyncMock(side_effect=_returns_argument)
    uow.events.mark_selection_processed = AsyncMock(return_value=True)
    uow.events.reserve_admission_slot = AsyncMock(return_value=True)
    uow.events.hold_registration_open = AsyncMock(return_value=True)

    uow.waitlist = MagicMock()
    uow.waitlist.get = AsyncMock(return_value=None)
    uow.waitlist.get_by_event_id = AsyncMock(return_value=[])
    uow.waitlist.count_by_event_id = AsyncMock(return_value=0)
    uow.waitlist.create = AsyncMock(side_effect=_returns_argument)
    uow.waitlist.delete = AsyncMock(return_value=True)
    uow.waitlist.delete_many = AsyncMock(return_value=0)

    uow.selections = MagicMock()
    uow.selections.get = AsyncMock(return_value=None)
    uow.selections.get_by_state = AsyncMock(return_value=[])
    uow.selections.count_by_state = AsyncMock(return_value=0)
    uow.selections.count_selected_with_pending_invitation = AsyncMock(return_value=0)
    uow.selections.create_many = AsyncMock(side_effect=_returns_argument)
    uow.selections.update = AsyncMock(side_effect=_returns_argument)
    uow.selections.delete = AsyncMock(return_value=True)

    uow.invitations = MagicMock()
    uow.invitations.get_by_id = AsyncMock(return_value=None)
    uow.invitations.get_pending_by_event_and_uid = AsyncMock(return_value=None)
    uow.invitations.get_active_by_uid = AsyncMock(return_value=[])
    uow.invitations.get_overdue_pending = AsyncMock(return_value=[])
    uow.invitations.create = AsyncMock(side_effect=_returns_argument)
    uow.invitations.update = AsyncMock(side_effect=_returns_argument)

    uow.admissions = MagicMock()
    uow.admissions.get = AsyncMock(return_value=None)
    uow.admissions.get_by_event_id = AsyncMock(return_value=[])
    uow.admissions.get_by_uid = AsyncMock(return_value=[])
    uow.admissions.create = AsyncMock(side_effect=_returns_argument)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock(side_effect=_returns_argument)
    uow.audit_events.get_by_event_id = AsyncMock(return_value=[])

    return uow


@pytest.fixture
def make_event():
    def _make_event(**overrides):
        values = dict(
            id=uuid4(),
            organizer_uid="organizer-1",
            title="Swim Lessons",
            capacity=0,
            sample_size=1,
            registration_start=NOW - HOUR,
            registration_end=NOW + HOUR,
            deadline_epoch_ms=NOW + 24 * HOUR,
            starts_at_epoch_ms=NOW + 72 * HOUR,
            selection_processed=False,
            waitlist_count=0,
            admitted_count=0,
            version=0,
        )
        values.update(overrides)
        return Event(**values)

    return _make_event


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def mock_notifier():
    notifier = MagicMock()
    notifier.send = AsyncMock()
    return notifier
