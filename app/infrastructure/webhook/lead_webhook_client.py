from __future__ import annotations

import logging
from typing import Any

import httpx

from app.application.exceptions import LeadSubmissionError
from app.application.ports.lead_submission import LeadSubmissionPort


class LeadWebhookClient(LeadSubmissionPort):
    def __init__(
        self,
        endpoint: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    async def submit(self, payload: dict[str, Any]) -> None:
        try:
            resp = await self._client.post(self._endpoint, json=payload)
        except httpx.HTTPError as e:
            self._logger.error("Lead webhook unreachable", extra={"reason": str(e)})
            raise LeadSubmissionError(f"Lead webhook request failed: {e}") from e

        if not resp.is_success:
            self._logger.error(
                "Lead webhook rejected submission",
                extra={"status": resp.status_code, "reason": resp.text[:200]},
            )
            raise LeadSubmissionError(f"Lead webhook returned status {resp.status_code}")

        self._logger.info("Lead webhook accepted submission", extra={"status": resp.status_code})

    async def aclose(self) -> None:
        await self._client.aclose()
