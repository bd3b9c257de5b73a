"""Use case for listing the activities a user registered for."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from sporthive.domain.entities import RegisteredActivity
from sporthive.infrastructure.repositories import RegistrationRepository


def list_registered_activities(session: Session, user_id: int) -> Sequence[RegisteredActivity]:
    """Return the user's activities with the time each registration was made."""

    return RegistrationRepository(session).list_activities_by_user(user_id)


__all__ = ["list_registered_activities"]
