"""
Transactional building blocks shared by the lifecycle use cases.

Every helper runs inside the caller's unit of work and never commits; the
caller decides the transaction boundary.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain import errors
from src.domain.entities import (
    AdmittedEntry,
    AuditEvent,
    Event,
    Invitation,
    InvitationStatus,
    SelectionState,
)


async def record_audit(
    uow: UnitOfWork,
    action: str,
    event_id: Optional[UUID],
    uid: Optional[str] = None,
    **metadata,
) -> None:
    audit = AuditEvent(
        event_id=event_id,
        uid=uid,
        action=action,
        event_metadata=metadata or None,
    )
    await uow.audit_events.create(audit)


async def issue_invitation(
    uow: UnitOfWork,
    event_id: UUID,
    uid: str,
    expires_at: Optional[int],
    now: int,
    is_replacement: bool = False,
) -> Result[Invitation]:
    """
    Create a pending invitation for an entrant still in play.

    Admitted and cancelled entrants are terminal and never get another
    invitation; neither does an entrant already holding a pending one.
    """
    if await uow.admissions.get(event_id, uid) is not None:
        return Return.err(
            Error(errors.ALREADY_ADMITTED, "Entrant is already admitted to this event")
        )

    entry = await uow.selections.get(event_id, uid)
    if entry is not None and entry.state == SelectionState.cancelled:
        return Return.err(
            Error(
                errors.ENTRANT_CANCELLED,
                "Entrant has declined or let an invitation expire for this event",
            )
        )

    existing = await uow.invitations.get_pending_by_event_and_uid(event_id, uid)
    if existing is not None:
        return Return.err(
            Error(
                errors.DUPLICATE_PENDING_INVITATION,
                "Entrant already has a pending invitation for this event",
            )
        )

    invitation = Invitation(
        event_id=event_id,
        uid=uid,
        status=InvitationStatus.pending,
        issued_at=now,
        expires_at=expires_at,
        is_replacement=is_replacement,
    )
    invitation = await uow.invitations.create(invitation)
    return Return.ok(invitation)


async def admit_entrant(
    uow: UnitOfWork, event: Event, uid: str, now: int
) -> Result[bool]:
    """
    Admit an entrant to an event.

    Returns ok(True) for a new admission and ok(False) when the entrant was
    already admitted. Capacity is taken through the event's slot counter, so
    concurrent admissions can never overshoot it.
    """
    existing = await uow.admissions.get(event.id, uid)
    if existing is not None:
        return Return.ok(False)

    reserved = await uow.events.reserve_admission_slot(event.id)
    if not reserved:
        return Return.err(
            Error(errors.CAPACITY_REACHED, "Event is at full capacity")
        )

    await uow.admissions.create(AdmittedEntry(event_id=event.id, uid=uid, admitted_at=now))

    # An admitted entrant leaves every other partition
    await uow.waitlist.delete(event.id, uid)
    await uow.selections.delete(event.id, uid)

    pending = await uow.invitations.get_pending_by_event_and_uid(event.id, uid)
    if pending is not None:
        pending.status = InvitationStatus.accepted
        pending.responded_at = now
        await uow.invitations.update(pending)

    return Return.ok(True)


async def cancel_entrant(uow: UnitOfWork, event_id: UUID, uid: str, now: int) -> bool:
    """Move a drawn entrant to cancelled; False if they have no partition entry"""
    entry = await uow.selections.get(event_id, uid)
    if entry is None:
        return False
    if entry.state != SelectionState.cancelled:
        entry.state = SelectionState.cancelled
        entry.updated_at = now
        await uow.selections.update(entry)
    return True


async def close_invitation(
    uow: UnitOfWork, invitation: Invitation, status: InvitationStatus, now: int
) -> None:
    """Move a pending invitation to declined or expired and cancel its entrant"""
    invitation.status = status
    invitation.responded_at = now
    await uow.invitations.update(invitation)
    await cancel_entrant(uow, invitation.event_id, invitation.uid, now)
