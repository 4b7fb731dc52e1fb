"""
Scheduler API Routes

Sweeps triggered by an external scheduler, authenticated with the
X-Admin-API-Key header.
"""

import logging

from fastapi import APIRouter, Depends

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.api.utils.ids import parse_uuid
from src.app.services.notifier import INotifier
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    ExpireInvitationUseCase,
    InvitationActionResponse,
    ProcessExpiredInvitationsUseCase,
)
from src.app.use_cases.selection import (
    ProcessDueSelectionsUseCase,
    SendSorryNotificationsUseCase,
    SweepResponse,
)
from src.depends import get_notifier, get_subscriptions, get_unit_of_work

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/scheduler",
    tags=["Scheduler"],
    dependencies=[Depends(verify_admin_api_key)],
)


@router.post("/selections", response_model=SweepResponse)
async def process_due_selections(
    uow: UnitOfWork = Depends(get_unit_of_work),
    subscriptions: SubscriptionRegistry = Depends(get_subscriptions),
    notifier: INotifier = Depends(get_notifier),
):
    """Draw every event whose registration has closed"""
    logger.info("Scheduler: processing due selections")
    use_case = ProcessDueSelectionsUseCase(uow, subscriptions, notifier)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/expirations", response_model=SweepResponse)
async def process_expired_invitations(
    uow: UnitOfWork = Depends(get_unit_of_work),
    subscriptions: SubscriptionRegistry = Depends(get_subscriptions),
):
    """Expire every pending invitation past its deadline"""
    logger.info("Scheduler: processing expired invitations")
    use_case = ProcessExpiredInvitationsUseCase(uow, subscriptions)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/sorry-notifications", response_model=SweepResponse)
async def send_sorry_notifications(
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotifier = Depends(get_notifier),
):
    """Tell non-selected entrants they were not picked, once per event"""
    logger.info("Scheduler: sending sorry notifications")
    use_case = SendSorryNotificationsUseCase(
        uow, notifier, notice_hours=ApplicationConfig.SORRY_NOTICE_HOURS
    )
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/invitations/{invitation_id}/expire", response_model=InvitationActionResponse)
async def expire_invitation(
    invitation_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    subscriptions: SubscriptionRegistry = Depends(get_subscriptions),
):
    """
    Expire Invitation

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_NOT_EXPIRED
    """
    use_case = ExpireInvitationUseCase(uow, subscriptions)
    result = await use_case.execute(parse_uuid(invitation_id, "invitation"))

    if result.is_err():
        raise_for_error(result.error)

    return result.value
