from __future__ import annotations

import logging
from typing import Any

from app.application.ports.lead_submission import LeadSubmissionPort


class MockLeadSubmission(LeadSubmissionPort):
    def __init__(self) -> None:
        self.submitted: list[dict[str, Any]] = []
        self._logger = logging.getLogger(__name__)

    async def submit(self, payload: dict[str, Any]) -> None:
        self.submitted.append(payload)
        self._logger.info(
            "Mock lead submission",
            extra={"services": ",".join(payload.get("services", [])), "status": "recorded"},
        )
