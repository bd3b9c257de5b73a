"""Use case for listing the activities a user organizes."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from sporthive.domain.entities import Activity
from sporthive.infrastructure.repositories import ActivityRepository


def list_activities_by_organizer(session: Session, organizer_id: int) -> Sequence[Activity]:
    return ActivityRepository(session).list_by_organizer(organizer_id)


__all__ = ["list_activities_by_organizer"]
