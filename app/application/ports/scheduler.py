from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class ScheduledTask(ABC):
    @abstractmethod
    def cancel(self) -> None:
        raise NotImplementedError


class SchedulerPort(ABC):
    @abstractmethod
    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        """Run callback once after delay_seconds. The returned task can be cancelled before it fires."""
        raise NotImplementedError
