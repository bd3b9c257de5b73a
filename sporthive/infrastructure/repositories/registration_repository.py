"""Persistence layer for activity registrations."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, desc
from sqlalchemy.orm import Session

from sporthive.domain.entities import Participant, RegisteredActivity, Registration
from sporthive.infrastructure.models import ActivityModel, RegistrationModel, UserModel

from .activity_repository import ActivityRepository


class RegistrationRepository:
    """Provide access to the ``registrations`` table.

    Writes only flush; the registration workflow commits them together with
    the matching participant counter update.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, user_id: int, activity_id: int) -> bool:
        query = (
            self.session.query(RegistrationModel.id)
            .filter(RegistrationModel.user_id == user_id)
            .filter(RegistrationModel.activity_id == activity_id)
        )
        return self.session.query(query.exists()).scalar()

    def add(self, registration: Registration) -> Registration:
        """Insert ``registration`` and flush it.

        Raises :class:`sqlalchemy.exc.IntegrityError` when the user already
        holds a registration for the activity.
        """

        model = RegistrationModel(
            user_id=registration.user_id,
            user_name=registration.user_name,
            activity_id=registration.activity_id,
        )
        if registration.registration_time is not None:
            model.registration_time = registration.registration_time
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def remove(self, user_id: int, activity_id: int) -> bool:
        result = self.session.execute(
            delete(RegistrationModel)
            .where(RegistrationModel.user_id == user_id)
            .where(RegistrationModel.activity_id == activity_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    def list_activities_by_user(self, user_id: int) -> Sequence[RegisteredActivity]:
        rows = (
            self.session.query(ActivityModel, RegistrationModel.registration_time)
            .join(RegistrationModel, RegistrationModel.activity_id == ActivityModel.id)
            .filter(RegistrationModel.user_id == user_id)
            .order_by(desc(RegistrationModel.registration_time), desc(RegistrationModel.id))
            .all()
        )
        return [
            RegisteredActivity(
                activity=ActivityRepository._to_entity(activity_model),
                registration_time=registration_time,
            )
            for activity_model, registration_time in rows
        ]

    def list_participants(self, activity_id: int) -> Sequence[Participant]:
        rows = (
            self.session.query(UserModel.id, UserModel.name, UserModel.email)
            .join(RegistrationModel, RegistrationModel.user_id == UserModel.id)
            .filter(RegistrationModel.activity_id == activity_id)
            .order_by(RegistrationModel.registration_time, RegistrationModel.id)
            .all()
        )
        return [Participant(id=row.id, name=row.name, email=row.email) for row in rows]

    @staticmethod
    def _to_entity(model: RegistrationModel) -> Registration:
        return Registration(
            id=model.id,
            user_id=model.user_id,
            user_name=model.user_name,
            activity_id=model.activity_id,
            registration_time=model.registration_time,
        )


__all__ = ["RegistrationRepository"]
