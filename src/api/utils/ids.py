from uuid import UUID

from fastapi import status

from libs.result import Error
from src.api.error import ClientError


def parse_uuid(value: str, label: str) -> UUID:
    """Parse a path id, 400 INVALID_<LABEL>_ID when it is not a UUID"""
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(
            Error(f"INVALID_{label.upper()}_ID", f"Invalid {label} ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
