"""
Waitlist count projection.

The visible count is always recomputed from the source tables, never
incremented or decremented in place:

- before the draw: roster size
- after the draw: non-selected + selected entrants still holding a pending invitation
"""

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Event, SelectionState


def project_waitlist_count(
    selection_processed: bool,
    roster_size: int,
    non_selected_count: int,
    pending_selected_count: int,
) -> int:
    if not selection_processed:
        return roster_size
    return non_selected_count + pending_selected_count


async def compute_waitlist_count(uow: UnitOfWork, event: Event) -> int:
    """Formula value read straight from the roster and partition tables"""
    if not event.selection_processed:
        roster_size = await uow.waitlist.count_by_event_id(event.id)
        return project_waitlist_count(False, roster_size, 0, 0)

    non_selected = await uow.selections.count_by_state(
        event.id, SelectionState.non_selected
    )
    pending_selected = await uow.selections.count_selected_with_pending_invitation(
        event.id
    )
    return project_waitlist_count(True, 0, non_selected, pending_selected)


async def recompute_waitlist_count(uow: UnitOfWork, event: Event) -> int:
    """Refresh the cached count on the event row and bump its version"""
    count = await compute_waitlist_count(uow, event)
    event.waitlist_count = count
    event.version = (event.version or 0) + 1
    await uow.events.update(event)
    return count
