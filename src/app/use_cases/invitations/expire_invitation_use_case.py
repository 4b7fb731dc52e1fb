"""
Expire Invitation Use Case

Closes a pending invitation whose response deadline has passed.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.feeds import publish_active_invitations, publish_waitlist_count
from src.app.services.lifecycle import close_invitation, record_audit
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.waitlist_count import recompute_waitlist_count
from src.domain import errors
from src.domain.base import current_epoch_ms
from src.domain.entities import InvitationStatus, is_expired

from .dtos import InvitationActionResponse, InvitationResponse


class ExpireInvitationUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        subscriptions: Optional[SubscriptionRegistry] = None,
    ):
        self.uow = uow
        self.subscriptions = subscriptions

    async def execute(
        self, invitation_id: UUID, now: Optional[int] = None
    ) -> Result[InvitationActionResponse]:
        now = now if now is not None else current_epoch_ms()

        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(
                    Error(errors.INVITATION_NOT_FOUND, "Invitation not found")
                )

            if invitation.status != InvitationStatus.pending:
                return Return.ok(
                    InvitationActionResponse(
                        invitation=InvitationResponse.from_invitation(invitation),
                        changed=False,
                    )
                )

            if not is_expired(invitation, now):
                return Return.err(
                    Error(
                        errors.INVITATION_NOT_EXPIRED,
                        "Invitation deadline has not been reached",
                    )
                )

            event = await self.uow.events.get_by_id(invitation.event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            await close_invitation(self.uow, invitation, InvitationStatus.expired, now)
            await recompute_waitlist_count(self.uow, event)
            await record_audit(
                self.uow,
                "invitation_expired",
                event.id,
                invitation.uid,
                invitation_id=str(invitation.id),
            )

            await self.uow.commit()

            publish_waitlist_count(self.subscriptions, event)
            await publish_active_invitations(
                self.subscriptions, self.uow, invitation.uid, now
            )

            return Return.ok(
                InvitationActionResponse(
                    invitation=InvitationResponse.from_invitation(invitation),
                    changed=True,
                )
            )
