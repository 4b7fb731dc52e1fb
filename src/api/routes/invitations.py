"""
Invitation API Routes

Issue, list and answer invitations.
"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.ids import parse_uuid
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    AcceptInvitationUseCase,
    ActiveInvitationsResponse,
    DeclineInvitationUseCase,
    InvitationActionResponse,
    InvitationResponse,
    IssueInvitationCommand,
    IssueInvitationUseCase,
    ListActiveInvitationsUseCase,
)
from src.depends import get_current_uid, get_subscriptions, get_unit_of_work

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class RespondInvitationRequest(BaseModel):
    """
    Accept / decline HTTP request payload

    The event id is checked against the invitation.
    """

    event_id: str = Field(..., description="Event the invitation belongs to")


@router.get("", response_model=ActiveInvitationsResponse)
async def list_active_invitations(
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Pending, unexpired invitations of the caller, newest first"""
    result = await ListActiveInvitationsUseCase(uow).execute(uid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationResponse,
)
async def issue_invitation(
    request: IssueInvitationCommand,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
    subscriptions: SubscriptionRegistry = Depends(get_subscriptions),
):
    """
    Issue Invitation

    Raises:
        - 400 Bad Request: INVALID_DEADLINE
        - 403 Forbidden: NOT_EVENT_ORGANIZER
        - 404 Not Found: EVENT_NOT_FOUND
        - 409 Conflict: DUPLICATE_PENDING_INVITATION
    """
    use_case = IssueInvitationUseCase(uow, subscriptions)
    result = await use_case.execute(
        uid,
        parse_uuid(request.event_id, "event"),
        request.uid,
        request.expires_at,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{invitation_id}/accept", response_model=InvitationActionResponse)
async def accept_invitation(
    invitation_id: str,
    request: RespondInvitationRequest,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
    subscriptions: SubscriptionRegistry = Depends(get_subscriptions),
):
    """
    Accept Invitation

    Accepting an already answered invitation returns it unchanged.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND, EVENT_NOT_FOUND
        - 409 Conflict: INVITATION_EXPIRED, CAPACITY_REACHED
    """
    use_case = AcceptInvitationUseCase(uow, subscriptions)
    result = await use_case.execute(
        parse_uuid(invitation_id, "invitation"),
        parse_uuid(request.event_id, "event"),
        uid,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{invitation_id}/decline", response_model=InvitationActionResponse)
async def decline_invitation(
    invitation_id: str,
    request: RespondInvitationRequest,
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
    subscriptions: SubscriptionRegistry = Depends(get_subscriptions),
):
    """
    Decline Invitation

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND, EVENT_NOT_FOUND
    """
    use_case = DeclineInvitationUseCase(uow, subscriptions)
    result = await use_case.execute(
        parse_uuid(invitation_id, "invitation"),
        parse_uuid(request.event_id, "event"),
        uid,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
