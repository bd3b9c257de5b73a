"""Ordered trust tiers that gate write operations."""

from enum import IntEnum


class PermissionLevel(IntEnum):
    """Permission tiers ordered from least to most trusted.

    - ``BANNED``: read-only access.
    - ``WARNED``: may register for activities but not publish them.
    - ``STANDARD``: default tier for new accounts; activities need review.
    - ``MANAGER``: reviews and removes activities.
    - ``ADMINISTRATOR``: full access.
    """

    BANNED = 1
    WARNED = 2
    STANDARD = 3
    MANAGER = 4
    ADMINISTRATOR = 5

    def at_least(self, level: "PermissionLevel") -> bool:
        """Return ``True`` when this tier is ``level`` or above."""

        return self >= level

    def exceeds(self, level: "PermissionLevel") -> bool:
        """Return ``True`` when this tier is strictly above ``level``."""

        return self > level


__all__ = ["PermissionLevel"]
