"""
Audit Use Cases

Read access to the lifecycle audit trail.
"""

from .get_event_audit_log_use_case import GetEventAuditLogUseCase

__all__ = [
    "GetEventAuditLogUseCase",
]
