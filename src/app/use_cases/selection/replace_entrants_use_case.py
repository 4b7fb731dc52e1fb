"""
Replace Entrants Use Case

Organizer-triggered promotion of non-selected entrants into open spots.
"""

import logging
import random
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.feeds import publish_active_invitations, publish_waitlist_count
from src.app.services.lifecycle import issue_invitation, record_audit
from src.app.services.notifier import INotifier, notify_quietly
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.waitlist_count import recompute_waitlist_count
from src.domain import errors
from src.domain.base import current_epoch_ms
from src.domain.entities import Invitation, NotificationKind, SelectionState

from .dtos import ReplaceEntrantsCommand, ReplaceEntrantsResponse, ReplacementFailure

logger = logging.getLogger(__name__)


class ReplaceEntrantsUseCase:
    """
    Use case for replacing declined or expired entrants.

    Business Rules:
    - Only the event organizer can trigger replacements
    - count >= 1 and new_deadline in the future
    - Candidates come from the non-selected pool only; cancelled and
      admitted entrants are never promoted again
    - Each promotion (non_selected -> selected + pending invitation) commits
      on its own; a failed promotion does not undo the others
    """

    def __init__(
        self,
        uow: UnitOfWork,
        subscriptions: Optional[SubscriptionRegistry] = None,
        notifier: Optional[INotifier] = None,
        rng: Optional[random.Random] = None,
    ):
        self.uow = uow
        self.subscriptions = subscriptions
        self.notifier = notifier
        self.rng = rng or random.SystemRandom()

    async def execute(
        self,
        organizer_uid: str,
        event_id: UUID,
        command: ReplaceEntrantsCommand,
        now: Optional[int] = None,
    ) -> Result[ReplaceEntrantsResponse]:
        now = now if now is not None else current_epoch_ms()

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            if event.organizer_uid != organizer_uid:
                return Return.err(
                    Error(
                        errors.NOT_EVENT_ORGANIZER,
                        "Only the event organizer can replace entrants",
                    )
                )

            if command.count < 1:
                return Return.err(
                    Error(errors.INVALID_COUNT, "Replacement count must be at least 1")
                )

            if command.new_deadline <= now:
                return Return.err(
                    Error(errors.INVALID_DEADLINE, "Deadline must be in the future")
                )

            candidates = await self.uow.selections.get_by_state(
                event_id, SelectionState.non_selected
            )
            if not candidates:
                return Return.err(
                    Error(
                        errors.NO_ELIGIBLE_CANDIDATES,
                        "No non-selected entrants are left to promote",
                    )
                )

            pool = [entry.uid for entry in candidates]
            chosen = self.rng.sample(pool, min(command.count, len(pool)))
            title = event.title

            promoted = []
            invitation_ids = []
            failures = []
            for uid in chosen:
                try:
                    outcome = await self._promote(
                        organizer_uid, event_id, uid, command.new_deadline, now
                    )
                except Exception as e:
                    logger.exception(f"Promotion of {uid} for event {event_id} failed")
                    await self.uow.rollback()
                    failures.append(
                        ReplacementFailure(
                            uid=uid, code=errors.PROMOTION_FAILED, message=str(e)
                        )
                    )
                    continue

                if outcome.is_err():
                    await self.uow.rollback()
                    failures.append(
                        ReplacementFailure(
                            uid=uid,
                            code=outcome.error.code,
                            message=outcome.error.message,
                        )
                    )
                    continue

                promoted.append(uid)
                invitation_ids.append(str(outcome.value.id))

            event = await self.uow.events.get_by_id(event_id)

            logger.info(
                f"Replacement for event {event_id}: {len(promoted)} promoted, "
                f"{len(failures)} failed"
            )
            if promoted:
                publish_waitlist_count(self.subscriptions, event)
            for uid in promoted:
                await publish_active_invitations(self.subscriptions, self.uow, uid, now)

            await notify_quietly(
                self.notifier,
                NotificationKind.replacement,
                event_id,
                promoted,
                "A spot opened up!",
                f"A spot opened up for {title}. "
                "Accept your invitation before the new deadline.",
            )

            return Return.ok(
                ReplaceEntrantsResponse(
                    event_id=str(event_id),
                    requested=command.count,
                    promoted=promoted,
                    invitation_ids=invitation_ids,
                    failures=failures,
                    waitlist_count=event.waitlist_count,
                )
            )

    async def _promote(
        self, organizer_uid: str, event_id: UUID, uid: str, deadline: int, now: int
    ) -> Result[Invitation]:
        """One entrant's promotion, committed as its own transaction"""
        event = await self.uow.events.get_by_id(event_id)

        entry = await self.uow.selections.get(event_id, uid)
        if entry is None or entry.state != SelectionState.non_selected:
            return Return.err(
                Error(errors.PROMOTION_FAILED, "Entrant is no longer non-selected")
            )

        entry.state = SelectionState.selected
        entry.updated_at = now
        await self.uow.selections.update(entry)

        issued = await issue_invitation(
            self.uow, event_id, uid, deadline, now, is_replacement=True
        )
        if issued.is_err():
            return issued

        await recompute_waitlist_count(self.uow, event)
        await record_audit(
            self.uow,
            "replacement_promoted",
            event_id,
            uid,
            invitation_id=str(issued.value.id),
            promoted_by=organizer_uid,
        )

        await self.uow.commit()
        return issued
