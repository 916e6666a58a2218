from __future__ import annotations

from app.application.ports.vehicle_catalog import VehicleCatalogPort
from app.infrastructure.knowledge.vehicle_catalog_data import CAR_MAKES_AND_MODELS


class VehicleCatalogStore(VehicleCatalogPort):
    def __init__(self, catalog: dict[str, list[str]] | None = None) -> None:
        self._catalog = catalog or CAR_MAKES_AND_MODELS
        self._by_key = {make.lower().strip(): make for make in self._catalog}

    def makes(self) -> list[str]:
        return list(self._catalog)

    def models(self, make: str) -> list[str]:
        canonical = self._by_key.get((make or "").lower().strip())
        if canonical is None:
            return []
        return list(self._catalog[canonical])
