"""Use case for creating users."""

from sqlalchemy.orm import Session

from sporthive.domain.entities import PermissionLevel, User
from sporthive.domain.exceptions import ConflictError
from sporthive.infrastructure.repositories import UserRepository
from sporthive.infrastructure.security import get_password_hash


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    permission: PermissionLevel = PermissionLevel.STANDARD,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ConflictError("The email address is already registered")

    user = User(
        id=None,
        name=name,
        email=email,
        password_hash=get_password_hash(password),
        permission=permission,
    )
    return repository.create(user)
