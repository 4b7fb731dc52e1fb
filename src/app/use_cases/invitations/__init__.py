"""
Invitation Ledger Use Cases
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .decline_invitation_use_case import DeclineInvitationUseCase
from .dtos import (
    ActiveInvitationsResponse,
    InvitationActionResponse,
    InvitationResponse,
    IssueInvitationCommand,
)
from .expire_invitation_use_case import ExpireInvitationUseCase
from .issue_invitation_use_case import IssueInvitationUseCase
from .list_active_invitations_use_case import ListActiveInvitationsUseCase
from .process_expired_invitations_use_case import ProcessExpiredInvitationsUseCase

__all__ = [
    "IssueInvitationUseCase",
    "AcceptInvitationUseCase",
    "DeclineInvitationUseCase",
    "ExpireInvitationUseCase",
    "ListActiveInvitationsUseCase",
    "ProcessExpiredInvitationsUseCase",
    "IssueInvitationCommand",
    "InvitationResponse",
    "InvitationActionResponse",
    "ActiveInvitationsResponse",
]
