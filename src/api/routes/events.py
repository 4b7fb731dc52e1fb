"""
Event API Routes

Event management, the waitlist roster, the draw, replacements and
organizer tooling.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.utils.ids import parse_uuid
from src.app.services.notifier import INotifier
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admissions import AdmissionResponse, AdmitEntrantUseCase
from src.app.use_cases.audit import GetEventAuditLogUseCase
from src.app.use_cases.events import (
    CreateEventCommand,
    CreateEventUseCase,
    EntrantStatusResponse,
    EventEntrantsResponse,
    EventResponse,
    GetEntrantStatusUseCase,
    GetEventEntrantsUseCase,
    GetEventUseCase,
    NotifyEntrantGroupUseCase,
    NotifyGroupResponse,
)
from src.app.use_cases.selection import (
    DrawResponse,
    DrawSelectionUseCase,
    ReplaceEntrantsCommand,
    ReplaceEntrantsResponse,
    ReplaceEntrantsUseCase,
)
from src.app.use_cases.waitlist import (
    JoinWaitlistUseCase,
    LeaveWaitlistUseCase,
    WaitlistResponse,
)
from src.depends import (
    get_current_uid,
    get_notifier,
    get_subscriptions,
    get_unit_of_work,
)

router = APIRouter(prefix="/events", tags=["Events"])


class ReplaceEntrantsRequest(BaseModel):
    """POST /events/{event_id}/replacements request payload"""

    count: int = Field(..., description="Number of entrants to promote")
    new_deadline: int = Field(..., description="Response deadline, epoch ms")


class AdmitEntrantRequest(BaseModel):
    uid: str = Field(..., min_length=1, max_length=128)


class NotifyGroupRequest(BaseModel):
    group: str = Field(
        ..., description="waitlisted, selected, non_selected, cancelled or admitted"
    )
    message: str = Field(..., min_length=1, max_length=500)
    title: Optional[str] = Field(None, max_length=80)


class AuditEntryResponse(BaseModel):
    action: str
    uid: Optional[str]
    timestamp: str
    metadata: Dict[str, Any]


class AuditLogResponse(BaseModel):
    event_id: str
    entries: List[AuditEntryResponse]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EventResponse)
async def create_event(
    request: CreateEventCommand,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Event

    The caller becomes the event organizer.

    Raises:
        - 400 Bad Request: INVALID_EVENT
        - 401 Unauthorized: NOT_AUTHENTICATED
    """
    use_case = CreateEventUseCase(uow, max_capacity=ApplicationConfig.MAX_EVENT_CAPACITY)
    result = await use_case.execute(uid, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Event details with the live waitlist count"""
    result = await GetEventUseCase(uow).execute(parse_uuid(event_id, "event"))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{event_id}/entrants", response_model=EventEntrantsResponse)
async def get_event_entrants(
    event_id: str,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Event Entrants

    Every entrant grouped by waitlisted / selected / non_selected /
    cancelled / admitted. Organizer only.

    Raises:
        - 403 Forbidden: NOT_EVENT_ORGANIZER
        - 404 Not Found: EVENT_NOT_FOUND
    """
    use_case = GetEventEntrantsUseCase(uow)
    result = await use_case.execute(uid, parse_uuid(event_id, "event"))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{event_id}/status", response_model=EntrantStatusResponse)
async def get_entrant_status(
    event_id: str,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Where the caller sits in the event lifecycle (is_joined, is_admitted)"""
    use_case = GetEntrantStatusUseCase(uow)
    result = await use_case.execute(parse_uuid(event_id, "event"), uid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{event_id}/waitlist", response_model=WaitlistResponse)
async def join_waitlist(
    event_id: str,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
    subscriptions: SubscriptionRegistry = Depends(get_subscriptions),
):
    """
    Join Waitlist

    Joining twice is a successful no-op.

    Raises:
        - 403 Forbidden: REGISTRATION_NOT_OPEN, REGISTRATION_CLOSED
        - 404 Not Found: EVENT_NOT_FOUND
        - 409 Conflict: ALREADY_ADMITTED, CAPACITY_REACHED
    """
    use_case = JoinWaitlistUseCase(uow, subscriptions)
    result = await use_case.execute(parse_uuid(event_id, "event"), uid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{event_id}/waitlist", response_model=WaitlistResponse)
async def leave_waitlist(
    event_id: str,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
    subscriptions: SubscriptionRegistry = Depends(get_subscriptions),
):
    """Leave Waitlist - succeeds silently when not on the roster"""
    use_case = LeaveWaitlistUseCase(uow, subscriptions)
    result = await use_case.execute(parse_uuid(event_id, "event"), uid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{event_id}/draw", response_model=DrawResponse)
async def draw_selection(
    event_id: str,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
    subscriptions: SubscriptionRegistry = Depends(get_subscriptions),
    notifier: INotifier = Depends(get_notifier),
):
    """
    Run Draw

    Organizer-triggered lottery. Succeeds at most once per event.

    Raises:
        - 403 Forbidden: NOT_EVENT_ORGANIZER
        - 404 Not Found: EVENT_NOT_FOUND
        - 409 Conflict: ALREADY_PROCESSED
    """
    use_case = DrawSelectionUseCase(uow, subscriptions, notifier)
    result = await use_case.execute(parse_uuid(event_id, "event"), organizer_uid=uid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{event_id}/replacements", response_model=ReplaceEntrantsResponse)
async def replace_entrants(
    event_id: str,
    request: ReplaceEntrantsRequest,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
    subscriptions: SubscriptionRegistry = Depends(get_subscriptions),
    notifier: INotifier = Depends(get_notifier),
):
    """
    Replace Entrants

    Promotes up to `count` non-selected entrants. Each promotion commits on
    its own; failed promotions are listed in `failures`.

    Raises:
        - 400 Bad Request: INVALID_COUNT, INVALID_DEADLINE
        - 403 Forbidden: NOT_EVENT_ORGANIZER
        - 404 Not Found: EVENT_NOT_FOUND
        - 409 Conflict: NO_ELIGIBLE_CANDIDATES
    """
    use_case = ReplaceEntrantsUseCase(uow, subscriptions, notifier)
    result = await use_case.execute(
        uid,
        parse_uuid(event_id, "event"),
        ReplaceEntrantsCommand(count=request.count, new_deadline=request.new_deadline),
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{event_id}/admissions", response_model=AdmissionResponse)
async def admit_entrant(
    event_id: str,
    request: AdmitEntrantRequest,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
    subscriptions: SubscriptionRegistry = Depends(get_subscriptions),
):
    """
    Admit Entrant

    Direct admission by the organizer.

    Raises:
        - 403 Forbidden: NOT_EVENT_ORGANIZER
        - 404 Not Found: EVENT_NOT_FOUND
        - 409 Conflict: CAPACITY_REACHED
    """
    use_case = AdmitEntrantUseCase(uow, subscriptions)
    result = await use_case.execute(
        parse_uuid(event_id, "event"), request.uid, organizer_uid=uid
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{event_id}/notifications",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=NotifyGroupResponse,
)
async def notify_group(
    event_id: str,
    request: NotifyGroupRequest,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotifier = Depends(get_notifier),
):
    """
    Notify Entrant Group

    Raises:
        - 400 Bad Request: INVALID_GROUP
        - 403 Forbidden: NOT_EVENT_ORGANIZER
        - 404 Not Found: EVENT_NOT_FOUND
    """
    use_case = NotifyEntrantGroupUseCase(uow, notifier)
    result = await use_case.execute(
        uid,
        parse_uuid(event_id, "event"),
        request.group,
        request.message,
        title=request.title,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{event_id}/audit-log", response_model=AuditLogResponse)
async def get_audit_log(
    event_id: str,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Lifecycle audit trail, oldest first. Organizer only."""
    result = await GetEventAuditLogUseCase(uow).execute(
        uid, parse_uuid(event_id, "event")
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
