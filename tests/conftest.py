"""Shared fixtures for the SportHive test-suite."""

from __future__ import annotations

import itertools
import os
import sys
import tempfile
from datetime import timedelta
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "sporthive_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["EXPIRATION_SWEEP_ENABLED"] = "false"

from sporthive.config import get_settings  # noqa: E402

get_settings.cache_clear()

from sporthive.domain.entities import (  # noqa: E402
    Activity,
    ActivityCondition,
    PermissionLevel,
    User,
)
from sporthive.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from sporthive.infrastructure.models import ActivityModel, RegistrationModel  # noqa: E402
from sporthive.infrastructure.repositories import (  # noqa: E402
    ActivityRepository,
    UserRepository,
)
from sporthive.utils import now_in_app_naive_datetime  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def make_user(session):
    """Insert users directly; the password hash is irrelevant for most tests."""

    sequence = itertools.count(1)

    def _make(
        permission: PermissionLevel = PermissionLevel.STANDARD,
        *,
        name: str | None = None,
        email: str | None = None,
        password_hash: str = "unused-hash",
    ) -> User:
        number = next(sequence)
        return UserRepository(session).create(
            User(
                id=None,
                name=name or f"User {number}",
                email=email or f"user{number}@example.com",
                password_hash=password_hash,
                permission=permission,
            )
        )

    return _make


@pytest.fixture()
def make_activity(session, make_user):
    """Insert an activity in any condition, including past start times."""

    def _make(
        *,
        organizer: User | None = None,
        condition: ActivityCondition = ActivityCondition.RECRUITING,
        capacity: int = 10,
        participants: int = 0,
        start_in: timedelta = timedelta(hours=1),
        duration: timedelta = timedelta(hours=2),
        name: str = "Morning run",
        type: str | None = "running",
        description: str | None = "Easy pace around the lake",
    ) -> Activity:
        organizer = organizer or make_user(PermissionLevel.MANAGER)
        start_time = now_in_app_naive_datetime() + start_in
        model = ActivityModel(
            name=name,
            condition=int(condition),
            type=type,
            description=description,
            location="City park",
            start_time=start_time,
            end_time=start_time + duration,
            capacity=capacity,
            participants=participants,
            organizer_id=organizer.id,
            organizer_name=organizer.name,
        )
        session.add(model)
        session.commit()
        session.refresh(model)
        return ActivityRepository._to_entity(model)

    return _make


@pytest.fixture()
def count_registrations(session):
    """Count registration rows directly, bypassing the participants counter."""

    def _count(activity_id: int) -> int:
        return (
            session.query(RegistrationModel)
            .filter(RegistrationModel.activity_id == activity_id)
            .count()
        )

    return _count


@pytest.fixture()
def reload_activity(session):
    def _reload(activity_id: int) -> Activity | None:
        return ActivityRepository(session).get(activity_id)

    return _reload
