from fastapi import APIRouter, Depends

from app.application.ports.promo_registry import PromoRegistryPort
from app.application.utils.package_rules import (
    CERAMIC_ADDON_DESCRIPTIONS,
    FASHION_COLORS,
    PPF_PACKAGE_DESCRIPTIONS,
    PPF_ZONE_DESCRIPTIONS,
    TINT_ADDONS,
    WINDSHIELD_DESCRIPTIONS,
    WINDSHIELD_OPTIONS,
    allowed_ppf_packages,
    available_ceramic_addons,
    available_ppf_addons,
    ceramic_included_addons,
    ppf_included_zones,
)
from app.domain.entities.services import CeramicPackage, PPFFilmType, PPFPackage, ServiceType, label_for
from app.wiring.dependencies import get_promo_registry


router = APIRouter(prefix="/api/v1/catalog")


@router.get("/services")
def list_services() -> list[dict[str, str]]:
    return [{"value": s.value, "label": label_for(s)} for s in ServiceType]


@router.get("/ppf/packages")
def list_ppf_packages(film_type: PPFFilmType | None = None) -> list[dict[str, str]]:
    return [
        {
            "value": p.value,
            "label": label_for(p, film_type),
            "description": PPF_PACKAGE_DESCRIPTIONS.get(p, ""),
        }
        for p in allowed_ppf_packages(film_type)
    ]


@router.get("/ppf/packages/{package}/addons")
def list_ppf_addons(package: PPFPackage) -> dict:
    return {
        "included": list(ppf_included_zones(package)),
        "available": [
            {"name": zone, "description": PPF_ZONE_DESCRIPTIONS.get(zone, "")}
            for zone in available_ppf_addons(package)
        ],
    }


@router.get("/ceramic/packages/{package}/addons")
def list_ceramic_addons(package: CeramicPackage) -> dict:
    return {
        "included": list(ceramic_included_addons(package)),
        "available": [
            {"name": addon, "description": CERAMIC_ADDON_DESCRIPTIONS.get(addon, "")}
            for addon in available_ceramic_addons(package)
        ],
    }


@router.get("/options")
def list_options() -> dict:
    return {
        "fashionColors": list(FASHION_COLORS),
        "tintAddOns": list(TINT_ADDONS),
        "windshield": [
            {"name": option, "description": WINDSHIELD_DESCRIPTIONS.get(option, "")}
            for option in WINDSHIELD_OPTIONS
        ],
    }


@router.get("/promos")
def list_promos(registry: PromoRegistryPort = Depends(get_promo_registry)) -> list[dict[str, str]]:
    return [{"code": p.code, "description": p.description, "rules": p.rules} for p in registry.all()]

