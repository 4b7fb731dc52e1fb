from fastapi import status
from libs.result import Error

from src.domain.errors import ErrorKind, error_kind

KIND_STATUS = {
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    ErrorKind.invalid_state: status.HTTP_409_CONFLICT,
    ErrorKind.capacity_exceeded: status.HTTP_409_CONFLICT,
    ErrorKind.window_closed: status.HTTP_403_FORBIDDEN,
    ErrorKind.window_not_open: status.HTTP_403_FORBIDDEN,
    ErrorKind.unauthorized: status.HTTP_403_FORBIDDEN,
    ErrorKind.invalid: status.HTTP_400_BAD_REQUEST,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Raise the ClientError for a known error kind, ServerError otherwise"""
    kind = error_kind(error.code)
    if kind is None:
        raise ServerError(error)
    raise ClientError(error, status_code=KIND_STATUS[kind])
