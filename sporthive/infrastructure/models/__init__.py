"""ORM models used by the application infrastructure."""

from .user import UserModel
from .activity import ActivityModel
from .registration import RegistrationModel

__all__ = [
    "ActivityModel",
    "RegistrationModel",
    "UserModel",
]
