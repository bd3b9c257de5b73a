"""SQLAlchemy model for activity registrations."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from sporthive.infrastructure.database import Base
from sporthive.utils import now_in_app_naive_datetime


class RegistrationModel(Base):
    """Database representation of a user's registration for an activity."""

    __tablename__ = "registrations"
    __table_args__ = (
        UniqueConstraint("user_id", "activity_id", name="uq_registrations_user_activity"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_name = Column(String(50), nullable=False)
    activity_id = Column(
        Integer,
        ForeignKey("activities.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    registration_time = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime
    )

    activity = relationship("ActivityModel", back_populates="registrations")


__all__ = ["RegistrationModel"]
