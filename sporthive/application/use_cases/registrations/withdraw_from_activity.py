"""Use case for cancelling the caller's registration."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sporthive.domain.entities import User
from sporthive.domain.exceptions import NotFoundError
from sporthive.infrastructure.repositories import ActivityRepository, RegistrationRepository

logger = logging.getLogger(__name__)

NOT_REGISTERED = "You are not registered for this activity"


def withdraw_from_activity(session: Session, *, activity_id: int, current_user: User) -> None:
    """Delete the caller's registration and release its seat in one transaction."""

    registrations = RegistrationRepository(session)
    if not registrations.exists(current_user.id, activity_id):
        raise NotFoundError(NOT_REGISTERED)

    try:
        removed = registrations.remove(current_user.id, activity_id)
        if removed:
            ActivityRepository(session).decrement_participants(activity_id)
            session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise

    if not removed:
        # A concurrent withdrawal deleted the row first.
        session.rollback()
        raise NotFoundError(NOT_REGISTERED)

    logger.info("User %s withdrew from activity %s", current_user.id, activity_id)


__all__ = ["NOT_REGISTERED", "withdraw_from_activity"]
