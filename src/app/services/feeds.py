"""
Live feeds built on the subscription registry.

Use cases publish after commit; UI-facing callers subscribe through the
listen_* helpers, which deliver the current value first.
"""

from typing import Callable, List, Optional
from uuid import UUID

from src.app.services.subscriptions import (
    Subscription,
    SubscriptionRegistry,
    active_invitations_key,
    waitlist_count_key,
)
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.waitlist_count import compute_waitlist_count
from src.domain.base import current_epoch_ms
from src.domain.entities import Event, Invitation


def publish_waitlist_count(
    registry: Optional[SubscriptionRegistry], event: Event
) -> None:
    if registry is None:
        return
    registry.publish(waitlist_count_key(event.id), event.waitlist_count, event.version)


async def publish_active_invitations(
    registry: Optional[SubscriptionRegistry],
    uow: UnitOfWork,
    uid: str,
    now: Optional[int] = None,
) -> None:
    if registry is None:
        return
    key = active_invitations_key(uid)
    if registry.listener_count(key) == 0:
        return
    invitations = await uow.invitations.get_active_by_uid(uid, now or current_epoch_ms())
    registry.publish(key, invitations)


async def listen_waitlist_count(
    uow: UnitOfWork,
    registry: SubscriptionRegistry,
    event_id: UUID,
    callback: Callable[[int], None],
) -> Optional[Subscription]:
    """Subscribe to an event's waitlist count; None if the event does not exist"""
    async with uow:
        event = await uow.events.get_by_id(event_id)
        if event is None:
            return None
        count = await compute_waitlist_count(uow, event)
    return registry.subscribe(
        waitlist_count_key(event_id), callback, count, event.version
    )


async def listen_active_invitations(
    uow: UnitOfWork,
    registry: SubscriptionRegistry,
    uid: str,
    callback: Callable[[List[Invitation]], None],
    now: Optional[int] = None,
) -> Subscription:
    async with uow:
        invitations = await uow.invitations.get_active_by_uid(
            uid, now or current_epoch_ms()
        )
    return registry.subscribe(active_invitations_key(uid), callback, invitations)
