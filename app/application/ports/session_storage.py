from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.quote_state import QuoteState


class SessionStoragePort(ABC):
    @abstractmethod
    def load(self) -> QuoteState | None:
        """Return the persisted snapshot, or None when nothing usable is stored."""
        raise NotImplementedError

    @abstractmethod
    def save(self, state: QuoteState) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError
