"""Use case for listing the users registered for an activity."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from sporthive.domain.entities import Participant
from sporthive.infrastructure.repositories import RegistrationRepository


def list_participants(session: Session, activity_id: int) -> Sequence[Participant]:
    return RegistrationRepository(session).list_participants(activity_id)


__all__ = ["list_participants"]
