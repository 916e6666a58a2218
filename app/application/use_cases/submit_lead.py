from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable

from app.application.ports.lead_submission import LeadSubmissionPort
from app.application.utils.state_codec import quote_state_to_dict
from app.domain.entities.quote_state import QuoteState


class SubmitLeadUseCase:
    def __init__(
        self,
        submission: LeadSubmissionPort,
        source: str,
        form_type: str,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._submission = submission
        self._source = source
        self._form_type = form_type
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._logger = logging.getLogger(__name__)

    def build_payload(self, state: QuoteState) -> dict[str, Any]:
        payload = quote_state_to_dict(state)
        payload["submittedAt"] = self._clock().isoformat()
        payload["source"] = self._source
        payload["formType"] = self._form_type
        return payload

    async def execute(self, state: QuoteState) -> None:
        """Send the quote as one lead. LeadSubmissionError propagates to the caller."""
        payload = self.build_payload(state)
        self._logger.info(
            "Submitting lead",
            extra={"services": ",".join(payload["services"]), "code": ",".join(payload["promoCodes"])},
        )
        await self._submission.submit(payload)
        self._logger.info("Lead submitted", extra={"status": "ok"})
