from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Promo:
    code: str
    description: str
    rules: str
