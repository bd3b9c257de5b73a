"""Domain entities exposed by the application."""

from .activity import Activity, ActivityCondition, ActivityQuery, RegisteredActivity
from .permission import PermissionLevel
from .registration import Participant, Registration
from .user import User

__all__ = [
    "Activity",
    "ActivityCondition",
    "ActivityQuery",
    "Participant",
    "PermissionLevel",
    "RegisteredActivity",
    "Registration",
    "User",
]
