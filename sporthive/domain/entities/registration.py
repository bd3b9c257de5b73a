"""Domain entities for activity registrations."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Registration:
    """Join record linking a user to an activity they signed up for."""

    id: int | None
    user_id: int
    user_name: str
    activity_id: int
    registration_time: datetime | None


@dataclass(frozen=True)
class Participant:
    """Public contact details of a registered user."""

    id: int
    name: str
    email: str


__all__ = ["Participant", "Registration"]
