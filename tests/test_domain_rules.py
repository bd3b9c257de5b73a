"""Unit tests for permission tiers, entity helpers and configuration."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from sporthive.config import Settings, get_settings, reset_settings_cache
from sporthive.domain.entities import Activity, ActivityCondition, PermissionLevel, User
from sporthive.utils.datetime import _resolve_timezone, ensure_app_naive_datetime


def _user(permission: PermissionLevel) -> User:
    return User(id=1, name="Ana", email="ana@example.com", password_hash="x", permission=permission)


def test_permission_levels_are_ordered() -> None:
    assert list(PermissionLevel) == sorted(PermissionLevel)
    assert PermissionLevel.STANDARD.at_least(PermissionLevel.WARNED)
    assert PermissionLevel.STANDARD.at_least(PermissionLevel.STANDARD)
    assert not PermissionLevel.STANDARD.exceeds(PermissionLevel.STANDARD)
    assert PermissionLevel.MANAGER.exceeds(PermissionLevel.STANDARD)


@pytest.mark.parametrize(
    ("permission", "privileged"),
    [
        (PermissionLevel.BANNED, False),
        (PermissionLevel.WARNED, False),
        (PermissionLevel.STANDARD, False),
        (PermissionLevel.MANAGER, True),
        (PermissionLevel.ADMINISTRATOR, True),
    ],
)
def test_privileged_users_start_above_standard(permission, privileged) -> None:
    assert _user(permission).is_privileged() is privileged


def test_activity_helpers() -> None:
    start = datetime(2030, 1, 1, 10, 0)
    activity = Activity(
        id=1,
        name="Run",
        condition=ActivityCondition.RECRUITING,
        type=None,
        description=None,
        location=None,
        start_time=start,
        end_time=start + timedelta(hours=1),
        capacity=2,
        participants=2,
        organizer_id=7,
        organizer_name="Ana",
    )

    assert activity.is_full()
    assert activity.is_organized_by(7)
    assert not activity.is_organized_by(None)


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("UTC", timedelta(0)),
        ("UTC+02:00", timedelta(hours=2)),
        ("GMT-0530", timedelta(hours=-5, minutes=-30)),
        ("Not/AZone", timedelta(0)),
    ],
)
def test_resolve_timezone(name, offset) -> None:
    tz = _resolve_timezone(name)

    assert tz.utcoffset(datetime(2030, 1, 1)) == offset


def test_aware_datetimes_are_stored_in_app_time() -> None:
    aware = datetime(2030, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))

    assert ensure_app_naive_datetime(aware) == datetime(2030, 6, 1, 10, 0)
    assert ensure_app_naive_datetime(None) is None


def test_settings_require_positive_sweep_interval(monkeypatch) -> None:
    monkeypatch.setenv("EXPIRATION_SWEEP_INTERVAL_SECONDS", "0")

    with pytest.raises(ValidationError):
        Settings()


def test_settings_cache_can_be_reset(monkeypatch) -> None:
    original = get_settings()
    monkeypatch.setenv("EXPIRATION_SWEEP_INTERVAL_SECONDS", "45")

    reset_settings_cache()
    try:
        assert get_settings().expiration_sweep_interval_seconds == 45
    finally:
        monkeypatch.undo()
        reset_settings_cache()

    assert get_settings().expiration_sweep_interval_seconds == original.expiration_sweep_interval_seconds
