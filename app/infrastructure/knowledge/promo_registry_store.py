from __future__ import annotations

from app.application.ports.promo_registry import PromoRegistryPort
from app.domain.entities.promo import Promo


PROMOS: tuple[Promo, ...] = (
    Promo("FREEADDON25", "Free door cups, edges, or luggage strip", "With Bronze, Silver, or Gold PPF"),
    Promo("CERAMICGOLD30", "30% off Ceramic Coating", "When bundled with Gold PPF"),
    Promo("CERAMICSILVER20", "20% off Ceramic Coating", "When bundled with Silver PPF"),
    Promo("FULLCLEAR20", "20% off Full Clear PPF Wrap", "Full wraps only"),
    Promo("TINTBUNDLE10", "10-20% off Tint", "When added to PPF Booking"),
    Promo("CERAMICPLUS50", "50% off Ceramic Coating", "With Full Wrap"),
    Promo("FALLSHIELD25", "25% off Front & Rocker Panel", "New customers only"),
    Promo("INTERIOR10", "10% off Interior Protection", "New vehicles without tint"),
)


class PromoRegistryStore(PromoRegistryPort):
    def __init__(self, promos: tuple[Promo, ...] | list[Promo] | None = None) -> None:
        self._promos = {p.code.upper(): p for p in (promos or PROMOS)}

    def find(self, code: str) -> Promo | None:
        return self._promos.get((code or "").strip().upper())

    def all(self) -> list[Promo]:
        return list(self._promos.values())
