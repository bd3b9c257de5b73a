"""Use case for publishing a new activity."""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from sporthive.domain.entities import Activity, PermissionLevel, User
from sporthive.domain.exceptions import PermissionDeniedError
from sporthive.infrastructure.repositories import ActivityRepository
from .validators import condition_for_editor, ensure_valid_time_range

logger = logging.getLogger(__name__)


def create_activity(
    session: Session,
    *,
    current_user: User,
    name: str,
    start_time: datetime,
    end_time: datetime,
    capacity: int,
    type: str | None = None,
    description: str | None = None,
    location: str | None = None,
) -> Activity:
    """Create an activity organized by ``current_user``.

    Activities from standard users wait for review; managers and
    administrators publish straight into recruitment.
    """

    if not current_user.has_permission(PermissionLevel.STANDARD):
        raise PermissionDeniedError("You are not allowed to publish activities")

    start, end = ensure_valid_time_range(start_time, end_time, require_future=True)

    entity = Activity(
        id=None,
        name=name,
        condition=condition_for_editor(current_user),
        type=type,
        description=description,
        location=location,
        start_time=start,
        end_time=end,
        capacity=capacity,
        participants=0,
        organizer_id=current_user.id,
        organizer_name=current_user.name,
    )
    activity = ActivityRepository(session).create(entity)
    logger.info(
        "Activity %s created by user %s with condition %s",
        activity.id,
        current_user.id,
        activity.condition.name,
    )
    return activity


__all__ = ["create_activity"]
