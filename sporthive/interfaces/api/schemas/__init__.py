from .activity import (
    ActivityCreate,
    ActivityRead,
    ActivitySearchResponse,
    ActivityUpdate,
    RegisteredActivityRead,
)
from .auth import Token
from .registration import ParticipantRead, RegistrationRead, RegistrationStatusRead

__all__ = [
    "ActivityCreate",
    "ActivityRead",
    "ActivitySearchResponse",
    "ActivityUpdate",
    "ParticipantRead",
    "RegisteredActivityRead",
    "RegistrationRead",
    "RegistrationStatusRead",
    "Token",
]
