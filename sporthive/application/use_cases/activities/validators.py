"""Validation helpers for activity use cases."""

from datetime import datetime

from sporthive.domain.entities import ActivityCondition, User
from sporthive.domain.exceptions import InvalidTimeRangeError
from sporthive.utils import ensure_app_naive_datetime, now_in_app_naive_datetime


def ensure_valid_time_range(
    start_time: datetime, end_time: datetime, *, require_future: bool
) -> tuple[datetime, datetime]:
    """Return both bounds normalized to application time, or raise.

    ``start_time`` must precede ``end_time``. With ``require_future`` the
    activity must also start after the current instant.
    """

    start = ensure_app_naive_datetime(start_time)
    end = ensure_app_naive_datetime(end_time)
    if start >= end:
        raise InvalidTimeRangeError("The activity must end after it starts")
    if require_future and start <= now_in_app_naive_datetime():
        raise InvalidTimeRangeError("The activity must start in the future")
    return start, end


def condition_for_editor(user: User) -> ActivityCondition:
    """Condition an activity takes after ``user`` creates or edits it.

    Privileged users publish directly; everyone else goes through review.
    """

    if user.is_privileged():
        return ActivityCondition.RECRUITING
    return ActivityCondition.PENDING


__all__ = ["condition_for_editor", "ensure_valid_time_range"]
