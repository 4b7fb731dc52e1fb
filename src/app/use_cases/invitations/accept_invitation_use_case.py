"""
Accept Invitation Use Case

Handles selected entrants accepting their spot.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.feeds import publish_active_invitations, publish_waitlist_count
from src.app.services.lifecycle import admit_entrant, close_invitation, record_audit
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.waitlist_count import recompute_waitlist_count
from src.domain import errors
from src.domain.base import current_epoch_ms
from src.domain.entities import InvitationStatus, is_expired

from .dtos import InvitationActionResponse, InvitationResponse

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting an invitation.

    Business Rules:
    - The invitation must belong to the given event and entrant
    - Accepting a terminal invitation is a successful no-op
    - A pending invitation past its deadline is expired instead, and the
      entrant cancelled
    - Admission takes a capacity slot atomically; when the event is full the
      invitation stays pending
    """

    def __init__(
        self,
        uow: UnitOfWork,
        subscriptions: Optional[SubscriptionRegistry] = None,
    ):
        self.uow = uow
        self.subscriptions = subscriptions

    async def execute(
        self,
        invitation_id: UUID,
        event_id: UUID,
        uid: str,
        now: Optional[int] = None,
    ) -> Result[InvitationActionResponse]:
        """
        Execute accept invitation use case.

        Args:
            invitation_id: Invitation being answered
            event_id: Event the invitation is for
            uid: Responding entrant
            now: Epoch milliseconds (defaults to the current time)

        Returns:
            Result with InvitationActionResponse DTO, or Error
        """
        now = now if now is not None else current_epoch_ms()

        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if (
                invitation is None
                or invitation.event_id != event_id
                or invitation.uid != uid
            ):
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

            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            if is_expired(invitation, now):
                await close_invitation(
                    self.uow, invitation, InvitationStatus.expired, now
                )
                await recompute_waitlist_count(self.uow, event)
                await record_audit(
                    self.uow,
                    "invitation_expired",
                    event_id,
                    uid,
                    invitation_id=str(invitation.id),
                )
                await self.uow.commit()

                publish_waitlist_count(self.subscriptions, event)
                await publish_active_invitations(self.subscriptions, self.uow, uid, now)

                return Return.err(
                    Error(errors.INVITATION_EXPIRED, "This invitation has expired")
                )

            admitted = await admit_entrant(self.uow, event, uid, now)
            if admitted.is_err():
                await self.uow.rollback()
                logger.warning(
                    f"Accept of invitation {invitation_id} by {uid} rejected: "
                    f"{admitted.error.code}"
                )
                return admitted

            invitation.status = InvitationStatus.accepted
            invitation.responded_at = now
            await self.uow.invitations.update(invitation)

            await recompute_waitlist_count(self.uow, event)
            await record_audit(
                self.uow,
                "invitation_accepted",
                event_id,
                uid,
                invitation_id=str(invitation.id),
                is_replacement=invitation.is_replacement,
            )

            await self.uow.commit()

            logger.info(f"{uid} accepted invitation {invitation_id} for event {event_id}")
            publish_waitlist_count(self.subscriptions, event)
            await publish_active_invitations(self.subscriptions, self.uow, uid, now)

            return Return.ok(
                InvitationActionResponse(
                    invitation=InvitationResponse.from_invitation(invitation),
                    changed=True,
                )
            )
