"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .permission import PermissionLevel


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    name: str
    email: str
    password_hash: str
    permission: PermissionLevel
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_permission(self, level: PermissionLevel) -> bool:
        """Return ``True`` when the user's tier is ``level`` or above."""

        return self.permission.at_least(level)

    def is_privileged(self) -> bool:
        """Return ``True`` for users whose activities skip the review queue."""

        return self.permission.exceeds(PermissionLevel.STANDARD)


__all__ = ["User"]
