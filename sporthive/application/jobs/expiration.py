"""Periodic sweep that finishes activities once their start time has passed.

Runs as an asyncio background task alongside the API. Each tick issues a
single bulk UPDATE; the blocking database work happens in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from sqlalchemy.orm import Session

from sporthive.infrastructure.repositories import ActivityRepository
from sporthive.utils import now_in_app_naive_datetime

logger = logging.getLogger(__name__)


class ExpirationJob:
    """Move started activities to ``FINISHED`` on a fixed interval."""

    name = "expire-started-activities"

    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        interval_seconds: float,
        clock: Callable[[], datetime] = now_in_app_naive_datetime,
    ) -> None:
        self._session_factory = session_factory
        self.interval_seconds = interval_seconds
        self._clock = clock
        self._running = False
        self.runs = 0

    def run_once(self) -> int:
        """Run a single sweep and return the number of activities finished."""

        with self._session_factory() as session:
            updated = ActivityRepository(session).finish_started(self._clock())
        self.runs += 1
        if updated:
            logger.info("[%s] Finished %s started activities", self.name, updated)
        return updated

    async def run(self) -> None:
        """Sweep immediately, then every ``interval_seconds`` until stopped.

        A failing sweep is logged and retried on the next tick.
        """

        self._running = True
        logger.info(
            "[%s] Scheduled to run every %s seconds", self.name, self.interval_seconds
        )
        while self._running:
            try:
                await asyncio.to_thread(self.run_once)
            except Exception:
                logger.exception("[%s] Sweep failed; retrying on next tick", self.name)
            if not self._running:
                break
            await asyncio.sleep(self.interval_seconds)

    def stop(self) -> None:
        self._running = False

    @property
    def running(self) -> bool:
        return self._running


__all__ = ["ExpirationJob"]
