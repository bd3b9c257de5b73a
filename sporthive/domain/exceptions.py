"""Errors raised by the application layer.

Each error carries an :class:`ErrorKind` so the HTTP boundary can map it to a
status code without inspecting messages.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    PERMISSION_DENIED = "permission_denied"
    INVALID_TIME_RANGE = "invalid_time_range"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_STATE = "invalid_state"


class DomainError(Exception):
    """Base class for rejected operations."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PermissionDeniedError(DomainError):
    kind = ErrorKind.PERMISSION_DENIED


class InvalidTimeRangeError(DomainError):
    kind = ErrorKind.INVALID_TIME_RANGE


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class ConflictError(DomainError):
    kind = ErrorKind.CONFLICT


class InvalidStateError(DomainError):
    kind = ErrorKind.INVALID_STATE


__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorKind",
    "InvalidStateError",
    "InvalidTimeRangeError",
    "NotFoundError",
    "PermissionDeniedError",
]
