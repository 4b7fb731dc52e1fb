"""
Process Due Selections Use Case

Scheduler sweep that draws every event whose registration has closed.
"""

import logging
import random
from typing import Optional

from libs.result import Result, Return
from src.app.services.notifier import INotifier
from src.app.services.subscriptions import SubscriptionRegistry
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import current_epoch_ms

from .draw_selection_use_case import DrawSelectionUseCase
from .dtos import SweepFailure, SweepResponse

logger = logging.getLogger(__name__)


class ProcessDueSelectionsUseCase:
    """
    Use case for the automatic draw sweep.

    Business Rules:
    - Events with registration_end <= now and no draw yet are drawn
    - Each event is drawn in its own transaction
    - A failing event is logged and skipped, the sweep carries on
    """

    def __init__(
        self,
        uow: UnitOfWork,
        subscriptions: Optional[SubscriptionRegistry] = None,
        notifier: Optional[INotifier] = None,
        rng: Optional[random.Random] = None,
    ):
        self.uow = uow
        self.draw = DrawSelectionUseCase(uow, subscriptions, notifier, rng)

    async def execute(self, now: Optional[int] = None) -> Result[SweepResponse]:
        now = now if now is not None else current_epoch_ms()

        async with self.uow:
            due = await self.uow.events.get_due_for_selection(now)
            event_ids = [event.id for event in due]

        processed = []
        failures = []
        for event_id in event_ids:
            result = await self.draw.execute(event_id, now=now)
            if result.is_err():
                logger.warning(
                    f"Automatic draw for event {event_id} skipped: "
                    f"{result.error.code} - {result.error.message}"
                )
                failures.append(
                    SweepFailure(
                        id=str(event_id),
                        code=result.error.code,
                        message=result.error.message,
                    )
                )
                continue
            processed.append(str(event_id))

        if event_ids:
            logger.info(
                f"Selection sweep: {len(processed)} drawn, {len(failures)} skipped"
            )
        return Return.ok(SweepResponse(processed=processed, failures=failures))
