from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.promo import Promo


class PromoRegistryPort(ABC):
    @abstractmethod
    def find(self, code: str) -> Promo | None:
        """Case-insensitive lookup of a promo code."""
        raise NotImplementedError

    @abstractmethod
    def all(self) -> list[Promo]:
        raise NotImplementedError
