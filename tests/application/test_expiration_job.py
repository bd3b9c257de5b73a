"""Tests for the periodic sweep that finishes started activities."""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta

import pytest

from sporthive.application.jobs import ExpirationJob
from sporthive.application.use_cases.registrations import register_for_activity
from sporthive.domain.entities import ActivityCondition
from sporthive.domain.exceptions import InvalidStateError
from sporthive.infrastructure.database import SessionLocal
from sporthive.utils import now_in_app_naive_datetime


def test_started_activities_are_finished(make_user, make_activity, reload_activity, session) -> None:
    started = make_activity(start_in=timedelta(minutes=-30))
    pending_started = make_activity(
        condition=ActivityCondition.PENDING, start_in=timedelta(minutes=-5)
    )
    upcoming = make_activity(start_in=timedelta(hours=3))
    job = ExpirationJob(SessionLocal, interval_seconds=60)

    assert job.run_once() == 2

    assert reload_activity(started.id).condition is ActivityCondition.FINISHED
    assert reload_activity(pending_started.id).condition is ActivityCondition.FINISHED
    assert reload_activity(upcoming.id).condition is ActivityCondition.RECRUITING
    assert job.runs == 1

    with pytest.raises(InvalidStateError):
        register_for_activity(session, activity_id=started.id, current_user=make_user())


def test_sweep_is_idempotent(make_activity) -> None:
    make_activity(start_in=timedelta(minutes=-1))
    job = ExpirationJob(SessionLocal, interval_seconds=60)

    assert job.run_once() == 1
    assert job.run_once() == 0


def test_sweep_uses_the_injected_clock(make_activity, reload_activity) -> None:
    activity = make_activity(start_in=timedelta(hours=2))
    job = ExpirationJob(
        SessionLocal,
        interval_seconds=60,
        clock=lambda: now_in_app_naive_datetime() + timedelta(hours=3),
    )

    assert job.run_once() == 1
    assert reload_activity(activity.id).condition is ActivityCondition.FINISHED


def test_run_keeps_going_after_a_failed_sweep(monkeypatch, caplog) -> None:
    job = ExpirationJob(SessionLocal, interval_seconds=0)
    calls: list[int] = []

    def flaky_run_once() -> int:
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("database unavailable")
        if len(calls) == 3:
            job.stop()
        return 0

    monkeypatch.setattr(job, "run_once", flaky_run_once)

    with caplog.at_level(logging.ERROR, logger="sporthive.application.jobs.expiration"):
        asyncio.run(job.run())

    assert len(calls) == 3
    assert not job.running
    assert any("Sweep failed" in record.getMessage() for record in caplog.records)
