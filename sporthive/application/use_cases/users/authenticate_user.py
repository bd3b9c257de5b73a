"""Use case for authenticating a user."""

from sqlalchemy.orm import Session

from sporthive.domain.entities import User
from sporthive.infrastructure.repositories import UserRepository
from sporthive.infrastructure.security import verify_password


def authenticate_user(session: Session, email: str, password: str) -> User | None:
    """Return the user when ``password`` matches, otherwise ``None``.

    Banned users can still sign in; their permission tier limits what they
    can do afterwards.
    """

    user = UserRepository(session).get_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        return None
    return user
