"""Use case for registering the caller for an activity."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from sporthive.domain.entities import ActivityCondition, PermissionLevel, Registration, User
from sporthive.domain.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    PermissionDeniedError,
)
from sporthive.infrastructure.repositories import ActivityRepository, RegistrationRepository

logger = logging.getLogger(__name__)

ACTIVITY_NOT_FOUND = "Activity not found"
ACTIVITY_NOT_OPEN = "Activity is not open for registration"
ACTIVITY_FULL = "Activity is full"
ALREADY_REGISTERED = "You are already registered for this activity"


def register_for_activity(
    session: Session, *, activity_id: int, current_user: User
) -> Registration:
    """Register ``current_user`` for the activity and take one seat.

    The checks below give early, readable rejections. The guarded counter
    update and the unique ``(user_id, activity_id)`` constraint repeat them
    inside the transaction, so concurrent callers cannot overbook the activity
    or register twice.
    """

    activities = ActivityRepository(session)
    registrations = RegistrationRepository(session)

    activity = activities.get(activity_id)
    if activity is None:
        raise NotFoundError(ACTIVITY_NOT_FOUND)
    if activity.condition is not ActivityCondition.RECRUITING:
        raise InvalidStateError(ACTIVITY_NOT_OPEN)
    if not current_user.has_permission(PermissionLevel.WARNED):
        raise PermissionDeniedError("Your account is not allowed to register for activities")
    if activity.is_full():
        raise ConflictError(ACTIVITY_FULL)
    if registrations.exists(current_user.id, activity_id):
        raise ConflictError(ALREADY_REGISTERED)

    try:
        registration = registrations.add(
            Registration(
                id=None,
                user_id=current_user.id,
                user_name=current_user.name,
                activity_id=activity_id,
                registration_time=None,
            )
        )
        seat_taken = activities.increment_participants(activity_id)
        if seat_taken:
            session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise ConflictError(ALREADY_REGISTERED) from exc
    except SQLAlchemyError:
        session.rollback()
        raise

    if not seat_taken:
        session.rollback()
        _raise_lost_seat(activities, activity_id)

    logger.info(
        "User %s registered for activity %s (registration %s)",
        current_user.id,
        activity_id,
        registration.id,
    )
    return registration


def _raise_lost_seat(activities: ActivityRepository, activity_id: int) -> None:
    """Explain why the guarded increment matched no row."""

    current = activities.get(activity_id)
    if current is None:
        raise NotFoundError(ACTIVITY_NOT_FOUND)
    if current.condition is not ActivityCondition.RECRUITING:
        raise InvalidStateError(ACTIVITY_NOT_OPEN)
    logger.warning(
        "Registration for activity %s rejected at write time: %s/%s seats taken",
        activity_id,
        current.participants,
        current.capacity,
    )
    raise ConflictError(ACTIVITY_FULL)


__all__ = [
    "ACTIVITY_FULL",
    "ACTIVITY_NOT_OPEN",
    "ALREADY_REGISTERED",
    "register_for_activity",
]
