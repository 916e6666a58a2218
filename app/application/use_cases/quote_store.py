from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

from app.application.exceptions import PromoCodeError
from app.application.ports.promo_registry import PromoRegistryPort
from app.application.ports.session_storage import SessionStoragePort
from app.domain.entities.promo import Promo
from app.domain.entities.quote_state import QuoteState


StateListener = Callable[[QuoteState], None]


class QuoteStore:
    """
    Owns the canonical QuoteState for one wizard session.

    merge() shallow-merges top-level fields (nested blocks are replaced whole)
    and writes the result through to session storage. No validation happens
    here; listeners are notified after every mutation.
    """

    def __init__(
        self,
        storage: SessionStoragePort,
        promo_registry: PromoRegistryPort,
    ) -> None:
        self._storage = storage
        self._promo_registry = promo_registry
        self._listeners: list[StateListener] = []
        self._logger = logging.getLogger(__name__)

        restored = storage.load()
        if restored is not None:
            self._logger.info("Quote session restored", extra={"services": len(restored.services)})
        self._state = restored or QuoteState()

    def get(self) -> QuoteState:
        return self._state

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def merge(self, partial: dict[str, Any]) -> QuoteState:
        self._state = replace(self._state, **partial)
        self._storage.save(self._state)
        self._notify()
        return self._state

    def reset(self) -> QuoteState:
        self._state = QuoteState()
        self._storage.clear()
        self._notify()
        return self._state

    def add_promo_code(self, code: str) -> Promo:
        normalized = (code or "").strip().upper()
        if not normalized:
            raise PromoCodeError("Please enter a promo code.")

        promo = self._promo_registry.find(normalized)
        if promo is None:
            self._logger.info("Promo code rejected", extra={"code": normalized, "reason": "unknown"})
            raise PromoCodeError("Invalid or expired promo code.")
        if promo.code in self._state.promo_codes:
            self._logger.info("Promo code rejected", extra={"code": promo.code, "reason": "duplicate"})
            raise PromoCodeError("This promo code has already been applied.")

        self.merge({"promo_codes": self._state.promo_codes + (promo.code,)})
        self._logger.info("Promo code applied", extra={"code": promo.code})
        return promo

    def remove_promo_code(self, code: str) -> QuoteState:
        normalized = (code or "").strip().upper()
        remaining = tuple(c for c in self._state.promo_codes if c != normalized)
        if remaining == self._state.promo_codes:
            return self._state
        return self.merge({"promo_codes": remaining})

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)
