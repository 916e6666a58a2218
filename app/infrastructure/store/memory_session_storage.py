from __future__ import annotations

from app.application.ports.session_storage import SessionStoragePort
from app.domain.entities.quote_state import QuoteState


class MemorySessionStorage(SessionStoragePort):
    def __init__(self, initial: QuoteState | None = None) -> None:
        self._state = initial
        self.save_count = 0

    def load(self) -> QuoteState | None:
        return self._state

    def save(self, state: QuoteState) -> None:
        self._state = state
        self.save_count += 1

    def clear(self) -> None:
        self._state = None
