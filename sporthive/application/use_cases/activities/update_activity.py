"""Use case for editing an activity."""

import logging
from dataclasses import replace
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sporthive.domain.entities import Activity, User
from sporthive.domain.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from sporthive.infrastructure.repositories import ActivityRepository
from .validators import condition_for_editor, ensure_valid_time_range

logger = logging.getLogger(__name__)


def update_activity(
    session: Session,
    *,
    activity_id: int,
    current_user: User,
    name: str | None = None,
    type: str | None = None,
    description: str | None = None,
    location: str | None = None,
    start_time: datetime | None = None,
    end_time: datetime | None = None,
    capacity: int | None = None,
) -> Activity:
    """Apply the provided changes to an activity owned by ``current_user``.

    Every edit sends the activity back to review unless the organizer is
    privileged, including edits of finished activities. A privileged edit of a
    finished activity that already started reopens it for registration until
    the next expiration sweep.
    """

    repository = ActivityRepository(session)
    current = repository.get(activity_id)
    if current is None:
        raise NotFoundError("Activity not found")
    if not current.is_organized_by(current_user.id):
        raise PermissionDeniedError("Only the organizer can edit this activity")

    start, end = ensure_valid_time_range(
        start_time if start_time is not None else current.start_time,
        end_time if end_time is not None else current.end_time,
        require_future=False,
    )
    new_capacity = capacity if capacity is not None else current.capacity
    if new_capacity < current.participants:
        raise ConflictError(
            f"Capacity cannot be lower than the {current.participants} registered participants"
        )

    updated = replace(
        current,
        name=name if name is not None else current.name,
        type=type if type is not None else current.type,
        description=description if description is not None else current.description,
        location=location if location is not None else current.location,
        start_time=start,
        end_time=end,
        capacity=new_capacity,
        condition=condition_for_editor(current_user),
    )
    try:
        activity = repository.update(updated)
    except IntegrityError as exc:
        # Participants grew past the new capacity after the read.
        session.rollback()
        raise ConflictError(
            "Capacity cannot be lower than the number of registered participants"
        ) from exc
    logger.info(
        "Activity %s edited by user %s; condition %s -> %s",
        activity_id,
        current_user.id,
        current.condition.name,
        activity.condition.name,
    )
    return activity


__all__ = ["update_activity"]
