"""
Draw Selection Use Case

Runs the one-time lottery that splits an event's roster into selected and
non-selected entrants.
"""

import logging
import random
from typing import List, Optional
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
from src.domain.entities import NotificationKind, SelectionEntry, SelectionState

from .dtos import DrawResponse

logger = logging.getLogger(__name__)


class DrawSelectionUseCase:
    """
    Use case for drawing an event's lottery.

    Business Rules:
    - A draw succeeds at most once per event (selection_processed is
      compare-and-set inside the transaction)
    - n = min(sample_size, roster size) entrants are picked uniformly
      without replacement
    - Every roster member ends up selected or non-selected, the roster
      is emptied
    - Each selected entrant gets one pending invitation that expires at
      the event's response deadline
    - An empty roster still marks the event processed
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
        event_id: UUID,
        organizer_uid: Optional[str] = None,
        now: Optional[int] = None,
    ) -> Result[DrawResponse]:
        """
        Execute draw selection use case.

        Args:
            event_id: Event to draw
            organizer_uid: Acting organizer, None when run by the scheduler
            now: Epoch milliseconds (defaults to the current time)

        Returns:
            Result with DrawResponse DTO, or Error
        """
        now = now if now is not None else current_epoch_ms()

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            if organizer_uid is not None and event.organizer_uid != organizer_uid:
                return Return.err(
                    Error(
                        errors.NOT_EVENT_ORGANIZER,
                        "Only the event organizer can run the draw",
                    )
                )

            if event.selection_processed or not (
                await self.uow.events.mark_selection_processed(event_id)
            ):
                return Return.err(
                    Error(errors.ALREADY_PROCESSED, "Selection has already run")
                )

            # Snapshot taken after the flag is set; later joins are rejected
            roster = await self.uow.waitlist.get_by_event_id(event_id)
            uids = [entry.uid for entry in roster]

            sample_size = min(max(event.sample_size, 0), len(uids))
            selected = self.rng.sample(uids, sample_size)
            chosen = set(selected)
            non_selected = [uid for uid in uids if uid not in chosen]

            entries: List[SelectionEntry] = [
                SelectionEntry(
                    event_id=event_id, uid=uid, state=SelectionState.selected, updated_at=now
                )
                for uid in selected
            ] + [
                SelectionEntry(
                    event_id=event_id,
                    uid=uid,
                    state=SelectionState.non_selected,
                    updated_at=now,
                )
                for uid in non_selected
            ]
            if entries:
                await self.uow.selections.create_many(entries)
                await self.uow.waitlist.delete_many(event_id, uids)

            invitation_ids = []
            for uid in selected:
                issued = await issue_invitation(
                    self.uow, event_id, uid, event.deadline_epoch_ms, now
                )
                if issued.is_ok():
                    invitation = issued.value
                elif issued.error.code == errors.DUPLICATE_PENDING_INVITATION:
                    # Issued by the organizer before the draw; now due at the event deadline
                    invitation = await self.uow.invitations.get_pending_by_event_and_uid(
                        event_id, uid
                    )
                    invitation.expires_at = event.deadline_epoch_ms
                    invitation = await self.uow.invitations.update(invitation)
                else:
                    return issued
                invitation_ids.append(str(invitation.id))

            count = await recompute_waitlist_count(self.uow, event)

            await record_audit(
                self.uow,
                "selection_drawn",
                event_id,
                organizer_uid,
                roster_size=len(uids),
                selected_count=len(selected),
            )

            await self.uow.commit()

            logger.info(
                f"Draw for event {event_id}: {len(selected)} selected, "
                f"{len(non_selected)} not selected"
            )
            publish_waitlist_count(self.subscriptions, event)
            for uid in selected:
                await publish_active_invitations(self.subscriptions, self.uow, uid, now)

            await notify_quietly(
                self.notifier,
                NotificationKind.selected,
                event_id,
                selected,
                "You've been selected!",
                f"You were selected for {event.title}. "
                "Accept your invitation before the deadline to keep your spot.",
            )

            return Return.ok(
                DrawResponse(
                    event_id=str(event_id),
                    selected=selected,
                    non_selected=non_selected,
                    invitation_ids=invitation_ids,
                    waitlist_count=count,
                )
            )
