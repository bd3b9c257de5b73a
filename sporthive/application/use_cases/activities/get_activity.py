"""Use case for retrieving a single activity."""

from sqlalchemy.orm import Session

from sporthive.domain.entities import Activity
from sporthive.domain.exceptions import NotFoundError
from sporthive.infrastructure.repositories import ActivityRepository


def get_activity(session: Session, activity_id: int) -> Activity:
    """Return the activity identified by ``activity_id`` or raise an error."""

    activity = ActivityRepository(session).get(activity_id)
    if activity is None:
        raise NotFoundError("Activity not found")
    return activity


__all__ = ["get_activity"]
