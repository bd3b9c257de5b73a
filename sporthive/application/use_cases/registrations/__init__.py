"""Use cases for registering for and withdrawing from activities."""

from .is_registered import is_registered
from .list_participants import list_participants
from .list_registered_activities import list_registered_activities
from .register_for_activity import register_for_activity
from .withdraw_from_activity import withdraw_from_activity

__all__ = [
    "is_registered",
    "list_participants",
    "list_registered_activities",
    "register_for_activity",
    "withdraw_from_activity",
]
