"""Use cases for managing activities and their review workflow."""

from .approve_activity import approve_activity
from .create_activity import create_activity
from .delete_activity import delete_activity
from .get_activity import get_activity
from .list_activities import list_activities
from .list_activities_by_organizer import list_activities_by_organizer
from .search_activities import search_activities
from .update_activity import update_activity

__all__ = [
    "approve_activity",
    "create_activity",
    "delete_activity",
    "get_activity",
    "list_activities",
    "list_activities_by_organizer",
    "search_activities",
    "update_activity",
]
