"""Routes exposing a user's activities and registrations."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sporthive.application.use_cases.activities import (
    list_activities_by_organizer as list_activities_by_organizer_uc,
)
from sporthive.application.use_cases.registrations import (
    list_registered_activities as list_registered_activities_uc,
)
from sporthive.domain.entities import User
from sporthive.infrastructure.database import get_db
from sporthive.interfaces.api.dependencies import get_current_user
from sporthive.interfaces.api.schemas import ActivityRead, RegisteredActivityRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/registrations", response_model=list[RegisteredActivityRead])
def list_my_registrations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[RegisteredActivityRead]:
    """Return the activities the caller registered for."""

    return [
        RegisteredActivityRead(
            **ActivityRead.model_validate(item.activity).model_dump(),
            registration_time=item.registration_time,
        )
        for item in list_registered_activities_uc(db, current_user.id)
    ]


@router.get("/{user_id}/activities/create", response_model=list[ActivityRead])
def list_activities_created_by_user(
    user_id: int, db: Session = Depends(get_db)
) -> list[ActivityRead]:
    """Return the activities organized by ``user_id``."""

    return [
        ActivityRead.model_validate(activity)
        for activity in list_activities_by_organizer_uc(db, user_id)
    ]
