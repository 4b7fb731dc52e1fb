"""
List Active Invitations Use Case
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import current_epoch_ms

from .dtos import ActiveInvitationsResponse, InvitationResponse


class ListActiveInvitationsUseCase:
    """Pending, unexpired invitations of an entrant, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, uid: str, now: Optional[int] = None
    ) -> Result[ActiveInvitationsResponse]:
        now = now if now is not None else current_epoch_ms()

        async with self.uow:
            invitations = await self.uow.invitations.get_active_by_uid(uid, now)
            return Return.ok(
                ActiveInvitationsResponse(
                    uid=uid,
                    invitations=[
                        InvitationResponse.from_invitation(invitation)
                        for invitation in invitations
                    ],
                )
            )
