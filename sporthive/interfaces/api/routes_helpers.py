"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from sporthive.domain.exceptions import DomainError, ErrorKind

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_TIME_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
}


def to_http_exception(exc: DomainError) -> HTTPException:
    """Translate a rejected operation into the matching HTTP error."""

    status_code = _STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=exc.message)
