"""
Admit Entrant Use Case

Direct admission of an entrant by the event organizer.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.feeds import publish_active_invitations, publish_waitlist_count
from src.app.services.lifecycle import admit_entrant, record_audit
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.waitlist_count import recompute_waitlist_count
from src.domain import errors
from src.domain.base import current_epoch_ms

from .dtos import AdmissionResponse


class AdmitEntrantUseCase:
    """
    Use case for admitting an entrant.

    Business Rules:
    - Admitting an already admitted entrant is a successful no-op
    - Admission never exceeds capacity when capacity > 0
    - Roster and selection traces of the entrant are removed
    - A pending invitation for the entrant is closed as accepted
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
        event_id: UUID,
        uid: str,
        organizer_uid: Optional[str] = None,
        now: Optional[int] = None,
    ) -> Result[AdmissionResponse]:
        now = now if now is not None else current_epoch_ms()

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            if organizer_uid is not None and event.organizer_uid != organizer_uid:
                return Return.err(
                    Error(
                        errors.NOT_EVENT_ORGANIZER,
                        "Only the event organizer can admit entrants",
                    )
                )

            admitted = await admit_entrant(self.uow, event, uid, now)
            if admitted.is_err():
                await self.uow.rollback()
                return admitted

            if not admitted.value:
                return Return.ok(
                    AdmissionResponse(
                        event_id=str(event_id),
                        uid=uid,
                        admitted=True,
                        changed=False,
                        admitted_count=event.admitted_count,
                    )
                )

            await recompute_waitlist_count(self.uow, event)
            await record_audit(
                self.uow, "entrant_admitted", event_id, uid, admitted_by=organizer_uid
            )

            await self.uow.commit()

            publish_waitlist_count(self.subscriptions, event)
            await publish_active_invitations(self.subscriptions, self.uow, uid, now)

            return Return.ok(
                AdmissionResponse(
                    event_id=str(event_id),
                    uid=uid,
                    admitted=True,
                    changed=True,
                    admitted_count=event.admitted_count,
                )
            )
