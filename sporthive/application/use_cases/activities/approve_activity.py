"""Use case for approving an activity waiting for review."""

import logging

from sqlalchemy.orm import Session

from sporthive.domain.entities import Activity, ActivityCondition, PermissionLevel, User
from sporthive.domain.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from sporthive.infrastructure.repositories import ActivityRepository

logger = logging.getLogger(__name__)

_NOT_PENDING = "Only activities pending review can be approved"


def approve_activity(session: Session, *, activity_id: int, current_user: User) -> Activity:
    """Open a pending activity for registration."""

    if not current_user.has_permission(PermissionLevel.MANAGER):
        raise PermissionDeniedError("You are not allowed to review activities")

    repository = ActivityRepository(session)
    activity = repository.get(activity_id)
    if activity is None:
        raise NotFoundError("Activity not found")
    if activity.condition is not ActivityCondition.PENDING:
        raise ConflictError(_NOT_PENDING)

    approved = repository.transition_condition(
        activity_id,
        from_condition=ActivityCondition.PENDING,
        to_condition=ActivityCondition.RECRUITING,
    )
    if approved is None:
        # Edited, expired or deleted between the read and the update.
        raise ConflictError(_NOT_PENDING)

    logger.info("Activity %s approved by user %s", activity_id, current_user.id)
    return approved


__all__ = ["approve_activity"]
