"""Routes for publishing, reviewing and joining activities."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from sporthive.application.use_cases.activities import (
    approve_activity as approve_activity_uc,
    create_activity as create_activity_uc,
    delete_activity as delete_activity_uc,
    get_activity as get_activity_uc,
    list_activities as list_activities_uc,
    search_activities as search_activities_uc,
    update_activity as update_activity_uc,
)
from sporthive.application.use_cases.registrations import (
    is_registered as is_registered_uc,
    list_participants as list_participants_uc,
    register_for_activity as register_for_activity_uc,
    withdraw_from_activity as withdraw_from_activity_uc,
)
from sporthive.domain.entities import Activity, ActivityQuery, User
from sporthive.domain.exceptions import DomainError
from sporthive.infrastructure.database import get_db
from sporthive.interfaces.api.dependencies import get_current_user
from sporthive.interfaces.api.routes_helpers import to_http_exception
from sporthive.interfaces.api.schemas import (
    ActivityCreate,
    ActivityRead,
    ActivitySearchResponse,
    ActivityUpdate,
    ParticipantRead,
    RegistrationRead,
    RegistrationStatusRead,
)

router = APIRouter(prefix="/activities", tags=["activities"])


def _to_read_model(activity: Activity) -> ActivityRead:
    return ActivityRead.model_validate(activity)


@router.get("/search", response_model=ActivitySearchResponse)
def search_activities(
    search_text: str | None = Query(default=None, alias="searchText"),
    name: str | None = None,
    description: str | None = None,
    type: str | None = None,
    db: Session = Depends(get_db),
) -> ActivitySearchResponse:
    """Search activities by free text, name, description and type."""

    criteria = ActivityQuery(
        search_text=search_text, name=name, description=description, type=type
    )
    activities = search_activities_uc(db, criteria)
    return ActivitySearchResponse(
        count=len(activities), data=[_to_read_model(activity) for activity in activities]
    )


@router.get("/", response_model=list[ActivityRead])
def list_activities(db: Session = Depends(get_db)) -> list[ActivityRead]:
    return [_to_read_model(activity) for activity in list_activities_uc(db)]


@router.post("/", response_model=ActivityRead, status_code=status.HTTP_201_CREATED)
def create_activity(
    activity_in: ActivityCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ActivityRead:
    """Publish a new activity organized by the caller."""

    try:
        activity = create_activity_uc(
            db, current_user=current_user, **activity_in.model_dump()
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(activity)


@router.get("/{activity_id}", response_model=ActivityRead)
def read_activity(activity_id: int, db: Session = Depends(get_db)) -> ActivityRead:
    try:
        activity = get_activity_uc(db, activity_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(activity)


@router.put("/{activity_id}", response_model=ActivityRead)
def update_activity(
    activity_id: int,
    activity_in: ActivityUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ActivityRead:
    """Edit an activity; non-privileged organizers send it back to review."""

    try:
        activity = update_activity_uc(
            db,
            activity_id=activity_id,
            current_user=current_user,
            **activity_in.model_dump(exclude_unset=True),
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(activity)


@router.put("/{activity_id}/pass", response_model=ActivityRead)
def approve_activity(
    activity_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ActivityRead:
    try:
        activity = approve_activity_uc(
            db, activity_id=activity_id, current_user=current_user
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(activity)


@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_activity(
    activity_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    try:
        delete_activity_uc(db, activity_id=activity_id, current_user=current_user)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{activity_id}/registration", response_model=list[ParticipantRead])
def list_participants(
    activity_id: int, db: Session = Depends(get_db)
) -> list[ParticipantRead]:
    """List the users registered for the activity."""

    return [
        ParticipantRead.model_validate(participant)
        for participant in list_participants_uc(db, activity_id)
    ]


@router.post(
    "/{activity_id}/register",
    response_model=RegistrationRead,
    status_code=status.HTTP_201_CREATED,
)
def register_for_activity(
    activity_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> RegistrationRead:
    try:
        registration = register_for_activity_uc(
            db, activity_id=activity_id, current_user=current_user
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return RegistrationRead.model_validate(registration)


@router.get("/{activity_id}/register", response_model=RegistrationStatusRead)
def read_registration_status(
    activity_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> RegistrationStatusRead:
    return RegistrationStatusRead(
        is_registered=is_registered_uc(
            db, user_id=current_user.id, activity_id=activity_id
        )
    )


@router.delete("/{activity_id}/cancel", status_code=status.HTTP_204_NO_CONTENT)
def withdraw_from_activity(
    activity_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    try:
        withdraw_from_activity_uc(
            db, activity_id=activity_id, current_user=current_user
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
