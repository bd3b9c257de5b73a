"""Schemas for registration endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class RegistrationRead(BaseModel):
    id: int
    user_id: int
    user_name: str
    activity_id: int
    registration_time: datetime | None

    model_config = ConfigDict(from_attributes=True)


class RegistrationStatusRead(BaseModel):
    is_registered: bool


class ParticipantRead(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)
