"""
Invitation Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Invitation


class IssueInvitationCommand(BaseModel):
    """Command for issue invitation use case"""

    event_id: str
    uid: str
    expires_at: int


class InvitationResponse(BaseModel):
    id: str
    event_id: str
    uid: str
    status: str
    is_replacement: bool
    issued_at: int
    expires_at: Optional[int] = None
    responded_at: Optional[int] = None

    @classmethod
    def from_invitation(cls, invitation: Invitation):
        return cls(
            id=str(invitation.id),
            event_id=str(invitation.event_id),
            uid=invitation.uid,
            status=invitation.status.value,
            is_replacement=invitation.is_replacement,
            issued_at=invitation.issued_at,
            expires_at=invitation.expires_at,
            responded_at=invitation.responded_at,
        )


class InvitationActionResponse(BaseModel):
    """Invitation after accept / decline / expire; changed is False on a retry"""

    invitation: InvitationResponse
    changed: bool


class ActiveInvitationsResponse(BaseModel):
    uid: str
    invitations: List[InvitationResponse]
