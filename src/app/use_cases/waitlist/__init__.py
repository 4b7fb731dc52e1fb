"""
Waitlist Roster Use Cases
"""

from .dtos import WaitlistResponse
from .join_waitlist_use_case import JoinWaitlistUseCase
from .leave_waitlist_use_case import LeaveWaitlistUseCase

__all__ = [
    "JoinWaitlistUseCase",
    "LeaveWaitlistUseCase",
    "WaitlistResponse",
]
