from __future__ import annotations

import asyncio
import logging
from typing import Callable

from app.application.ports.scheduler import ScheduledTask, SchedulerPort


class AsyncioScheduledTask(ScheduledTask):
    def __init__(self, handle: asyncio.TimerHandle) -> None:
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()


class AsyncioScheduler(SchedulerPort):
    """Runs callbacks on the running event loop (the server loop under FastAPI)."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._logger = logging.getLogger(__name__)

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        loop = self._loop or asyncio.get_running_loop()
        handle = loop.call_later(delay_seconds, self._guarded, callback)
        return AsyncioScheduledTask(handle)

    def _guarded(self, callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception:
            self._logger.exception("Scheduled callback failed")
