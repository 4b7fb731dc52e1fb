"""
Process Expired Invitations Use Case

Scheduler sweep over pending invitations whose deadline has passed.
"""

import logging
from typing import Optional

from libs.result import Result, Return
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.selection.dtos import SweepFailure, SweepResponse
from src.domain.base import current_epoch_ms

from .expire_invitation_use_case import ExpireInvitationUseCase

logger = logging.getLogger(__name__)


class ProcessExpiredInvitationsUseCase:
    """
    Use case for the deadline sweep.

    Business Rules:
    - Every pending invitation with expires_at <= now is expired
    - Its entrant moves to cancelled; no replacement is drawn
    - Each invitation is expired in its own transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        subscriptions: Optional[SubscriptionRegistry] = None,
    ):
        self.uow = uow
        self.expire = ExpireInvitationUseCase(uow, subscriptions)

    async def execute(self, now: Optional[int] = None) -> Result[SweepResponse]:
        now = now if now is not None else current_epoch_ms()

        async with self.uow:
            overdue = await self.uow.invitations.get_overdue_pending(now)
            invitation_ids = [invitation.id for invitation in overdue]

        processed = []
        failures = []
        for invitation_id in invitation_ids:
            result = await self.expire.execute(invitation_id, now=now)
            if result.is_err():
                logger.warning(
                    f"Could not expire invitation {invitation_id}: "
                    f"{result.error.code} - {result.error.message}"
                )
                failures.append(
                    SweepFailure(
                        id=str(invitation_id),
                        code=result.error.code,
                        message=result.error.message,
                    )
                )
                continue
            if result.value.changed:
                processed.append(str(invitation_id))

        if invitation_ids:
            logger.info(
                f"Deadline sweep: {len(processed)} invitation(s) expired, "
                f"{len(failures)} failed"
            )
        return Return.ok(SweepResponse(processed=processed, failures=failures))
