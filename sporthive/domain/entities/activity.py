"""Domain entities describing sports activities."""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class ActivityCondition(IntEnum):
    """Review and lifecycle state of an activity."""

    PENDING = 1
    RECRUITING = 2
    FINISHED = 3


@dataclass
class Activity:
    """A scheduled sports activity with bounded capacity."""

    id: int | None
    name: str
    condition: ActivityCondition
    type: str | None
    description: str | None
    location: str | None
    start_time: datetime
    end_time: datetime
    capacity: int
    participants: int
    organizer_id: int
    organizer_name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_full(self) -> bool:
        return self.participants >= self.capacity

    def is_organized_by(self, user_id: int | None) -> bool:
        return user_id is not None and self.organizer_id == user_id


@dataclass
class RegisteredActivity:
    """An activity as seen by one of its participants."""

    activity: Activity
    registration_time: datetime | None


@dataclass(frozen=True)
class ActivityQuery:
    """Search criteria for activities.

    ``search_text`` matches name or description and takes precedence over the
    field-scoped ``name`` and ``description`` filters. ``type`` is always
    applied as an exact match.
    """

    search_text: str | None = None
    name: str | None = None
    description: str | None = None
    type: str | None = None


__all__ = ["Activity", "ActivityCondition", "ActivityQuery", "RegisteredActivity"]
