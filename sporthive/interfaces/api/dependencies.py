"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from sporthive.domain.entities import User
from sporthive.infrastructure.database import get_db
from sporthive.infrastructure.repositories import UserRepository
from sporthive.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def _credentials_exception(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token.

    The user is re-read on every request so permission changes, bans
    included, apply to tokens that were issued earlier.
    """

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    email = payload.get("sub")
    if not isinstance(email, str) or not email:
        raise _credentials_exception()

    user = UserRepository(db).get_by_email(email)
    if user is None:
        raise _credentials_exception("User not found")
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)
