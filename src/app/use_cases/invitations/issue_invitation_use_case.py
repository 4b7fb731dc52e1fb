"""
Issue Invitation Use Case

Organizer hands a spot offer to a single entrant.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.feeds import publish_active_invitations, publish_waitlist_count
from src.app.services.lifecycle import issue_invitation, record_audit
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.waitlist_count import recompute_waitlist_count
from src.domain import errors
from src.domain.base import current_epoch_ms

from .dtos import InvitationResponse


class IssueInvitationUseCase:
    """
    Use case for issuing an invitation.

    Business Rules:
    - Only the event organizer can issue invitations
    - Deadline must be in the future
    - At most one pending invitation per entrant and event
    - Admitted and cancelled entrants cannot be invited again
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
        organizer_uid: str,
        event_id: UUID,
        uid: str,
        expires_at: int,
        now: Optional[int] = None,
    ) -> Result[InvitationResponse]:
        now = now if now is not None else current_epoch_ms()

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            if event.organizer_uid != organizer_uid:
                return Return.err(
                    Error(
                        errors.NOT_EVENT_ORGANIZER,
                        "Only the event organizer can issue invitations",
                    )
                )

            if expires_at <= now:
                return Return.err(
                    Error(errors.INVALID_DEADLINE, "Deadline must be in the future")
                )

            issued = await issue_invitation(self.uow, event_id, uid, expires_at, now)
            if issued.is_err():
                return issued
            invitation = issued.value

            await recompute_waitlist_count(self.uow, event)
            await record_audit(
                self.uow,
                "invitation_issued",
                event_id,
                uid,
                invitation_id=str(invitation.id),
                issued_by=organizer_uid,
            )

            await self.uow.commit()

            publish_waitlist_count(self.subscriptions, event)
            await publish_active_invitations(self.subscriptions, self.uow, uid, now)

            return Return.ok(InvitationResponse.from_invitation(invitation))
