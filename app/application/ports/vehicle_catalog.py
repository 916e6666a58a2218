from __future__ import annotations

from abc import ABC, abstractmethod


class VehicleCatalogPort(ABC):
    @abstractmethod
    def makes(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def models(self, make: str) -> list[str]:
        """Models for a make, empty when the make is unknown."""
        raise NotImplementedError
