"""Use case for searching activities."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from sporthive.domain.entities import Activity, ActivityQuery
from sporthive.infrastructure.repositories import ActivityRepository


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def search_activities(session: Session, criteria: ActivityQuery) -> Sequence[Activity]:
    """Return the activities matching ``criteria``.

    Blank filters are ignored, so an empty query lists every activity.
    """

    normalized = ActivityQuery(
        search_text=_clean(criteria.search_text),
        name=_clean(criteria.name),
        description=_clean(criteria.description),
        type=_clean(criteria.type),
    )
    return ActivityRepository(session).search(normalized)


__all__ = ["search_activities"]
