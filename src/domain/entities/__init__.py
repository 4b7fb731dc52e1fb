"""
EventEase Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    EntrantState,
    InvitationStatus,
    NotificationKind,
    SelectionState,
)

# Export all entities
from .event import Event
from .waitlist_entry import WaitlistEntry
from .selection_entry import SelectionEntry
from .invitation import Invitation, is_expired
from .admitted_entry import AdmittedEntry
from .notification_request import NotificationRequest
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "EntrantState",
    "InvitationStatus",
    "NotificationKind",
    "SelectionState",
    # Entities
    "Event",
    "WaitlistEntry",
    "SelectionEntry",
    "Invitation",
    "AdmittedEntry",
    "NotificationRequest",
    "AuditEvent",
    # Helpers
    "is_expired",
]
