"""SQLAlchemy model for sports activities."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from sporthive.domain.entities import ActivityCondition
from sporthive.infrastructure.database import Base
from sporthive.utils import now_in_app_naive_datetime


class ActivityModel(Base):
    """Database representation of an activity and its participant counter."""

    __tablename__ = "activities"
    __table_args__ = (
        CheckConstraint("capacity > 0", name="ck_activities_capacity_positive"),
        CheckConstraint(
            "participants >= 0", name="ck_activities_participants_non_negative"
        ),
        CheckConstraint(
            "participants <= capacity", name="ck_activities_participants_within_capacity"
        ),
        CheckConstraint("start_time < end_time", name="ck_activities_time_range"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    condition = Column(
        Integer,
        nullable=False,
        default=int(ActivityCondition.PENDING),
        index=True,
    )
    type = Column(String(50), nullable=True, index=True)
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=False)
    capacity = Column(Integer, nullable=False)
    participants = Column(Integer, nullable=False, default=0, server_default="0")
    organizer_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    organizer_name = Column(String(50), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)

    registrations = relationship(
        "RegistrationModel",
        back_populates="activity",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["ActivityModel"]
