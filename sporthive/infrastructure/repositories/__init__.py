"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityRepository
from .registration_repository import RegistrationRepository
from .user_repository import UserRepository

__all__ = [
    "ActivityRepository",
    "RegistrationRepository",
    "UserRepository",
]
