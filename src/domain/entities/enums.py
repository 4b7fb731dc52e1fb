"""
EventEase Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"
    declined = "declined"
    expired = "expired"


class SelectionState(str, Enum):
    """Post-draw partition an entrant occupies (admission is tracked separately)"""

    selected = "selected"
    non_selected = "non_selected"
    cancelled = "cancelled"


class EntrantState(str, Enum):
    """Where an entrant currently sits in an event's lifecycle"""

    none = "none"
    waitlisted = "waitlisted"
    selected = "selected"
    non_selected = "non_selected"
    cancelled = "cancelled"
    admitted = "admitted"


class NotificationKind(str, Enum):
    """Kinds of push notification requests written to the outbox"""

    selected = "selected"
    replacement = "replacement"
    not_selected = "not_selected"
    organizer_message = "organizer_message"
