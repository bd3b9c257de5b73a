"""Use case for deleting an activity."""

import logging

from sqlalchemy.orm import Session

from sporthive.domain.entities import PermissionLevel, User
from sporthive.domain.exceptions import NotFoundError, PermissionDeniedError
from sporthive.infrastructure.repositories import ActivityRepository

logger = logging.getLogger(__name__)


def delete_activity(session: Session, *, activity_id: int, current_user: User) -> None:
    """Delete the activity and its registrations.

    Allowed for the organizer and for managers and above.
    """

    repository = ActivityRepository(session)
    activity = repository.get(activity_id)
    if activity is None:
        raise NotFoundError("Activity not found")
    if not (
        activity.is_organized_by(current_user.id)
        or current_user.has_permission(PermissionLevel.MANAGER)
    ):
        raise PermissionDeniedError("You are not allowed to delete this activity")

    if not repository.delete(activity_id):
        raise NotFoundError("Activity not found")
    logger.info("Activity %s deleted by user %s", activity_id, current_user.id)


__all__ = ["delete_activity"]
