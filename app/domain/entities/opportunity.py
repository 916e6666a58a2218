from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from app.domain.entities.services import ServiceType


class OpportunityKind(str, Enum):
    FREE_ADDON = "FREE_ADDON"
    UPSELL = "UPSELL"


@dataclass(frozen=True)
class Opportunity:
    kind: OpportunityKind
    title: str
    description: str
    reason: str  # contextual explanation shown to the customer
    code: str
    eligible_addons: tuple[str, ...] | None = None  # FREE_ADDON only
    service_to_enable: ServiceType | None = None  # UPSELL only
