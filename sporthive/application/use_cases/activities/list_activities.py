"""Use case for listing every activity."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from sporthive.domain.entities import Activity
from sporthive.infrastructure.repositories import ActivityRepository


def list_activities(session: Session) -> Sequence[Activity]:
    """Return all activities, latest start first."""

    return ActivityRepository(session).list()


__all__ = ["list_activities"]
