from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class LeadSubmissionPort(ABC):
    @abstractmethod
    async def submit(self, payload: dict[str, Any]) -> None:
        """Deliver a lead payload. Raises LeadSubmissionError on failure."""
        raise NotImplementedError
