"""Schemas for activity endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from sporthive.domain.entities import ActivityCondition


class ActivityBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    type: str | None = Field(default=None, max_length=50)
    description: str | None = None
    location: str | None = Field(default=None, max_length=255)


class ActivityCreate(ActivityBase):
    """Payload required to publish an activity."""

    start_time: datetime
    end_time: datetime
    capacity: int = Field(..., gt=0)


class ActivityUpdate(BaseModel):
    """Partial update of an activity; omitted fields keep their value."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    type: str | None = Field(default=None, max_length=50)
    description: str | None = None
    location: str | None = Field(default=None, max_length=255)
    start_time: datetime | None = None
    end_time: datetime | None = None
    capacity: int | None = Field(default=None, gt=0)

    model_config = ConfigDict(extra="forbid")


class ActivityRead(ActivityBase):
    id: int
    condition: ActivityCondition
    start_time: datetime
    end_time: datetime
    capacity: int
    participants: int
    organizer_id: int
    organizer_name: str
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ActivitySearchResponse(BaseModel):
    count: int
    data: list[ActivityRead]


class RegisteredActivityRead(ActivityRead):
    registration_time: datetime | None
