"""
Use Cases

Organized into domain folders:
- events/: Event creation and organizer tooling
- waitlist/: Roster join / leave
- selection/: Lottery draw, replacements, scheduler sweeps
- invitations/: Invitation ledger
- admissions/: Admission ledger
- audit/: Audit trail

Import from subdirectories for better organization.
"""

from .admissions import (
    AdmitEntrantUseCase,
    GetUpcomingEventsUseCase,
)
from .audit import (
    GetEventAuditLogUseCase,
)
from .events import (
    CreateEventUseCase,
    GetEntrantStatusUseCase,
    GetEventEntrantsUseCase,
    GetEventUseCase,
    NotifyEntrantGroupUseCase,
)
from .invitations import (
    AcceptInvitationUseCase,
    DeclineInvitationUseCase,
    ExpireInvitationUseCase,
    IssueInvitationUseCase,
    ListActiveInvitationsUseCase,
    ProcessExpiredInvitationsUseCase,
)
from .selection import (
    DrawSelectionUseCase,
    ProcessDueSelectionsUseCase,
    ReplaceEntrantsUseCase,
    SendSorryNotificationsUseCase,
)
from .waitlist import (
    JoinWaitlistUseCase,
    LeaveWaitlistUseCase,
)

__all__ = [
    # Events
    "CreateEventUseCase",
    "GetEventUseCase",
    "GetEventEntrantsUseCase",
    "GetEntrantStatusUseCase",
    "NotifyEntrantGroupUseCase",
    # Waitlist
    "JoinWaitlistUseCase",
    "LeaveWaitlistUseCase",
    # Selection
    "DrawSelectionUseCase",
    "ReplaceEntrantsUseCase",
    "ProcessDueSelectionsUseCase",
    "SendSorryNotificationsUseCase",
    # Invitations
    "IssueInvitationUseCase",
    "AcceptInvitationUseCase",
    "DeclineInvitationUseCase",
    "ExpireInvitationUseCase",
    "ListActiveInvitationsUseCase",
    "ProcessExpiredInvitationsUseCase",
    # Admissions
    "AdmitEntrantUseCase",
    "GetUpcomingEventsUseCase",
    # Audit
    "GetEventAuditLogUseCase",
]
