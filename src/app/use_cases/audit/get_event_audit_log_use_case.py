"""
Get Event Audit Log Use Case

Retrieves the lifecycle audit trail of an event for its organizer.
"""

from typing import Any, Dict
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain import errors


class GetEventAuditLogUseCase:
    """
    Use case for retrieving an event's audit trail.

    Business Rules:
    - Caller must be the event organizer
    - Results ordered oldest first
    - Each entry includes action, uid, timestamp, metadata
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, organizer_uid: str, event_id: UUID
    ) -> Result[Dict[str, Any]]:
        """
        Execute get event audit log use case.

        Args:
            organizer_uid: Caller uid from JWT
            event_id: Event whose trail is requested

        Returns:
            Result with the event id and its audit entries, or Error
        """
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(errors.EVENT_NOT_FOUND, "Event not found"))

            if event.organizer_uid != organizer_uid:
                return Return.err(
                    Error(
                        errors.NOT_EVENT_ORGANIZER,
                        "Only the event organizer can view the audit log",
                    )
                )

            entries = await self.uow.audit_events.get_by_event_id(event_id)

            return Return.ok(
                {
                    "event_id": str(event_id),
                    "entries": [
                        {
                            "action": entry.action,
                            "uid": entry.uid,
                            "timestamp": entry.created_at.isoformat() + "Z",
                            "metadata": entry.event_metadata or {},
                        }
                        for entry in entries
                    ],
                }
            )
