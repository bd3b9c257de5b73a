"""SQLAlchemy model for the users table."""

from sqlalchemy import Column, DateTime, Integer, String

from sporthive.domain.entities import PermissionLevel
from sporthive.infrastructure.database import Base
from sporthive.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a platform user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    permission = Column(
        Integer, nullable=False, default=int(PermissionLevel.STANDARD)
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["UserModel"]
