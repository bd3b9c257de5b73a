"""Use case for checking whether a user holds a registration."""

from sqlalchemy.orm import Session

from sporthive.infrastructure.repositories import RegistrationRepository


def is_registered(session: Session, *, user_id: int, activity_id: int) -> bool:
    return RegistrationRepository(session).exists(user_id, activity_id)


__all__ = ["is_registered"]
