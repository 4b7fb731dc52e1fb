"""
Error taxonomy

Every error code returned by a use case belongs to exactly one kind. The API
layer only looks at the kind when choosing an HTTP status.
"""

from enum import Enum


class ErrorKind(str, Enum):
    not_found = "NotFound"
    invalid_state = "InvalidState"
    capacity_exceeded = "CapacityExceeded"
    window_closed = "WindowClosed"
    window_not_open = "WindowNotOpen"
    unauthorized = "Unauthorized"
    invalid = "Invalid"


EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
INVITATION_NOT_FOUND = "INVITATION_NOT_FOUND"
ALREADY_ADMITTED = "ALREADY_ADMITTED"
ALREADY_PROCESSED = "ALREADY_PROCESSED"
ENTRANT_CANCELLED = "ENTRANT_CANCELLED"
DUPLICATE_PENDING_INVITATION = "DUPLICATE_PENDING_INVITATION"
INVITATION_EXPIRED = "INVITATION_EXPIRED"
INVITATION_NOT_EXPIRED = "INVITATION_NOT_EXPIRED"
NO_ELIGIBLE_CANDIDATES = "NO_ELIGIBLE_CANDIDATES"
CAPACITY_REACHED = "CAPACITY_REACHED"
REGISTRATION_CLOSED = "REGISTRATION_CLOSED"
REGISTRATION_NOT_OPEN = "REGISTRATION_NOT_OPEN"
NOT_EVENT_ORGANIZER = "NOT_EVENT_ORGANIZER"
NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
INVALID_DEADLINE = "INVALID_DEADLINE"
INVALID_COUNT = "INVALID_COUNT"
INVALID_EVENT = "INVALID_EVENT"
INVALID_GROUP = "INVALID_GROUP"
PROMOTION_FAILED = "PROMOTION_FAILED"


ERROR_KINDS = {
    EVENT_NOT_FOUND: ErrorKind.not_found,
    INVITATION_NOT_FOUND: ErrorKind.not_found,
    ALREADY_ADMITTED: ErrorKind.invalid_state,
    ALREADY_PROCESSED: ErrorKind.invalid_state,
    ENTRANT_CANCELLED: ErrorKind.invalid_state,
    DUPLICATE_PENDING_INVITATION: ErrorKind.invalid_state,
    INVITATION_EXPIRED: ErrorKind.invalid_state,
    INVITATION_NOT_EXPIRED: ErrorKind.invalid_state,
    NO_ELIGIBLE_CANDIDATES: ErrorKind.invalid_state,
    CAPACITY_REACHED: ErrorKind.capacity_exceeded,
    REGISTRATION_CLOSED: ErrorKind.window_closed,
    REGISTRATION_NOT_OPEN: ErrorKind.window_not_open,
    NOT_EVENT_ORGANIZER: ErrorKind.unauthorized,
    NOT_AUTHENTICATED: ErrorKind.unauthorized,
    INVALID_DEADLINE: ErrorKind.invalid,
    INVALID_COUNT: ErrorKind.invalid,
    INVALID_EVENT: ErrorKind.invalid,
    INVALID_GROUP: ErrorKind.invalid,
    PROMOTION_FAILED: ErrorKind.invalid_state,
}


def error_kind(code: str):
    """Kind for a known error code, None for anything unexpected"""
    return ERROR_KINDS.get(code)
