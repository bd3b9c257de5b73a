"""Persistence layer for activities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import desc, or_, update
from sqlalchemy.orm import Session

from sporthive.domain.entities import Activity, ActivityCondition, ActivityQuery
from sporthive.domain.exceptions import NotFoundError
from sporthive.infrastructure.models import ActivityModel
from sporthive.utils import ensure_app_naive_datetime

_LIKE_ESCAPE = "\\"


def _contains_pattern(value: str) -> str:
    """Build a substring LIKE pattern that matches ``value`` literally."""

    escaped = (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class ActivityRepository:
    """Provide CRUD operations and counter updates for activities.

    ``create``, ``update``, ``transition_condition``, ``delete`` and
    ``finish_started`` commit their own work. ``increment_participants`` and
    ``decrement_participants`` only flush, so the caller can commit them
    together with the registration row they belong to.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Activity]:
        query = self.session.query(ActivityModel).order_by(
            desc(ActivityModel.start_time), desc(ActivityModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_by_organizer(self, organizer_id: int) -> Sequence[Activity]:
        query = (
            self.session.query(ActivityModel)
            .filter(ActivityModel.organizer_id == organizer_id)
            .order_by(desc(ActivityModel.start_time), desc(ActivityModel.id))
        )
        return [self._to_entity(model) for model in query.all()]

    def search(self, criteria: ActivityQuery) -> Sequence[Activity]:
        """Return the activities matching ``criteria``, latest start first."""

        query = self.session.query(ActivityModel)
        if criteria.search_text:
            pattern = _contains_pattern(criteria.search_text)
            query = query.filter(
                or_(
                    ActivityModel.name.ilike(pattern, escape=_LIKE_ESCAPE),
                    ActivityModel.description.ilike(pattern, escape=_LIKE_ESCAPE),
                )
            )
        else:
            if criteria.name:
                query = query.filter(
                    ActivityModel.name.ilike(
                        _contains_pattern(criteria.name), escape=_LIKE_ESCAPE
                    )
                )
            if criteria.description:
                query = query.filter(
                    ActivityModel.description.ilike(
                        _contains_pattern(criteria.description), escape=_LIKE_ESCAPE
                    )
                )
        if criteria.type:
            query = query.filter(ActivityModel.type == criteria.type)
        query = query.order_by(desc(ActivityModel.start_time), desc(ActivityModel.id))
        return [self._to_entity(model) for model in query.all()]

    def get(self, activity_id: int) -> Activity | None:
        model = self.session.get(ActivityModel, activity_id, populate_existing=True)
        return self._to_entity(model) if model else None

    def create(self, activity: Activity) -> Activity:
        model = ActivityModel()
        self._apply_entity_to_model(model, activity)
        model.participants = 0
        model.organizer_id = activity.organizer_id
        model.organizer_name = activity.organizer_name
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, activity: Activity) -> Activity:
        """Persist the editable fields and condition of ``activity``.

        The participant counter and the organizer snapshot are left untouched.
        """

        model = self.session.get(ActivityModel, activity.id)
        if not model:
            raise NotFoundError(f"Activity with id {activity.id} not found")
        self._apply_entity_to_model(model, activity)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def transition_condition(
        self,
        activity_id: int,
        *,
        from_condition: ActivityCondition,
        to_condition: ActivityCondition,
    ) -> Activity | None:
        """Move the activity to ``to_condition`` if it is still in ``from_condition``.

        Returns ``None`` when no row matched, i.e. the activity is gone or
        another writer already changed its condition.
        """

        result = self.session.execute(
            update(ActivityModel)
            .where(ActivityModel.id == activity_id)
            .where(ActivityModel.condition == int(from_condition))
            .values(condition=int(to_condition))
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        if result.rowcount == 0:
            return None
        return self.get(activity_id)

    def delete(self, activity_id: int) -> bool:
        model = self.session.get(ActivityModel, activity_id)
        if not model:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def increment_participants(self, activity_id: int) -> bool:
        """Take one seat if the activity is recruiting and not full.

        The capacity and condition are re-checked by the UPDATE itself, so two
        concurrent callers can never both take the last seat. Returns ``False``
        when no seat was taken.
        """

        result = self.session.execute(
            update(ActivityModel)
            .where(ActivityModel.id == activity_id)
            .where(ActivityModel.participants < ActivityModel.capacity)
            .where(ActivityModel.condition == int(ActivityCondition.RECRUITING))
            .values(participants=ActivityModel.participants + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def decrement_participants(self, activity_id: int) -> bool:
        """Release one seat, never going below zero."""

        result = self.session.execute(
            update(ActivityModel)
            .where(ActivityModel.id == activity_id)
            .where(ActivityModel.participants > 0)
            .values(participants=ActivityModel.participants - 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def finish_started(self, now: datetime) -> int:
        """Mark every activity that started before ``now`` as finished.

        Returns the number of activities that changed condition.
        """

        result = self.session.execute(
            update(ActivityModel)
            .where(ActivityModel.start_time < ensure_app_naive_datetime(now))
            .where(ActivityModel.condition != int(ActivityCondition.FINISHED))
            .values(condition=int(ActivityCondition.FINISHED))
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return result.rowcount

    @staticmethod
    def _to_entity(model: ActivityModel) -> Activity:
        return Activity(
            id=model.id,
            name=model.name,
            condition=ActivityCondition(model.condition),
            type=model.type,
            description=model.description,
            location=model.location,
            start_time=model.start_time,
            end_time=model.end_time,
            capacity=model.capacity,
            participants=model.participants,
            organizer_id=model.organizer_id,
            organizer_name=model.organizer_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _apply_entity_to_model(model: ActivityModel, activity: Activity) -> None:
        model.name = activity.name
        model.condition = int(activity.condition)
        model.type = activity.type
        model.description = activity.description
        model.location = activity.location
        model.start_time = ensure_app_naive_datetime(activity.start_time)
        model.end_time = ensure_app_naive_datetime(activity.end_time)
        model.capacity = activity.capacity


__all__ = ["ActivityRepository"]
