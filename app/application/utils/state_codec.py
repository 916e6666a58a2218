"""
Conversion between QuoteState and its structured-text shape.

The serialized form keeps the customer-facing key names (camelCase) and stores
enum members by their stable tag. It is used for session snapshots, the lead
payload and the HTTP surface.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from app.domain.entities.quote_state import (
    CeramicConfig,
    ContactInfo,
    PPFConfig,
    QuoteState,
    TintConfig,
    VehicleInfo,
    WindshieldConfig,
)
from app.domain.entities.services import (
    CeramicPackage,
    ContactMethod,
    InteriorProtectionOption,
    PaintCorrectionLevel,
    PPFFilmType,
    PPFPackage,
    ServiceType,
    TintPackage,
    TintType,
    UndercoatingPackage,
)

E = TypeVar("E", bound=Enum)


def _tag(value: Enum | None) -> str | None:
    return value.value if value is not None else None


def _enum(enum_cls: type[E], raw: Any) -> E | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(raw)
    except ValueError:
        return None


def _enum_tuple(enum_cls: type[E], raw: Any) -> tuple[E, ...]:
    result: list[E] = []
    for item in raw or []:
        member = _enum(enum_cls, item)
        if member is not None and member not in result:
            result.append(member)
    return tuple(result)


def _str_tuple(raw: Any) -> tuple[str, ...]:
    result: list[str] = []
    for item in raw or []:
        if isinstance(item, str) and item not in result:
            result.append(item)
    return tuple(result)


def _str(raw: Any) -> str:
    return raw if isinstance(raw, str) else ""


def ppf_to_dict(ppf: PPFConfig) -> dict[str, Any]:
    return {
        "filmType": _tag(ppf.film_type),
        "package": _tag(ppf.package),
        "addOns": list(ppf.add_ons),
        "fashionColor": ppf.fashion_color,
        "isFusion": ppf.is_fusion,
    }


def ppf_from_dict(data: dict[str, Any]) -> PPFConfig:
    return PPFConfig(
        film_type=_enum(PPFFilmType, data.get("filmType")),
        package=_enum(PPFPackage, data.get("package")),
        add_ons=_str_tuple(data.get("addOns")),
        fashion_color=data.get("fashionColor") or None,
        is_fusion=bool(data.get("isFusion", False)),
    )


def tint_from_dict(data: dict[str, Any]) -> TintConfig:
    return TintConfig(
        type=_enum(TintType, data.get("type")),
        package=_enum(TintPackage, data.get("package")),
        add_ons=_str_tuple(data.get("addOns")),
    )


def ceramic_from_dict(data: dict[str, Any]) -> CeramicConfig:
    return CeramicConfig(
        package=_enum(CeramicPackage, data.get("package")),
        add_ons=_str_tuple(data.get("addOns")),
    )


def vehicle_from_dict(data: dict[str, Any]) -> VehicleInfo:
    return VehicleInfo(
        year=_str(data.get("year")),
        make=_str(data.get("make")),
        model=_str(data.get("model")),
        size=_str(data.get("size")),
        color=_str(data.get("color")),
        timing=_str(data.get("timing")),
    )


def contact_from_dict(data: dict[str, Any]) -> ContactInfo:
    return ContactInfo(
        first_name=_str(data.get("firstName")),
        last_name=_str(data.get("lastName")),
        phone=_str(data.get("phone")),
        email=_str(data.get("email")),
        method=_enum(ContactMethod, data.get("method")) or ContactMethod.TEXT,
    )


def quote_state_to_dict(state: QuoteState) -> dict[str, Any]:
    return {
        "services": [s.value for s in state.services],
        "ppf": ppf_to_dict(state.ppf),
        "tint": {
            "type": _tag(state.tint.type),
            "package": _tag(state.tint.package),
            "addOns": list(state.tint.add_ons),
        },
        "ceramic": {
            "package": _tag(state.ceramic.package),
            "addOns": list(state.ceramic.add_ons),
        },
        "paintCorrection": _tag(state.paint_correction),
        "interior": [o.value for o in state.interior],
        "windshield": {"addOns": list(state.windshield.add_ons)},
        "undercoating": _tag(state.undercoating),
        "detailingNotes": state.detailing_notes,
        "vehicle": {
            "year": state.vehicle.year,
            "make": state.vehicle.make,
            "model": state.vehicle.model,
            "size": state.vehicle.size,
            "color": state.vehicle.color,
            "timing": state.vehicle.timing,
        },
        "contact": {
            "firstName": state.contact.first_name,
            "lastName": state.contact.last_name,
            "phone": state.contact.phone,
            "email": state.contact.email,
            "method": state.contact.method.value,
        },
        "promoCodes": list(state.promo_codes),
        "notes": state.notes,
    }


def partial_from_dict(data: dict[str, Any]) -> dict[str, Any]:
    """
    Convert serialized top-level keys into QuoteState field updates.
    Nested blocks are converted whole; unknown keys are ignored.
    """
    updates: dict[str, Any] = {}
    if "services" in data:
        updates["services"] = _enum_tuple(ServiceType, data["services"])
    if "ppf" in data:
        updates["ppf"] = ppf_from_dict(data["ppf"] or {})
    if "tint" in data:
        updates["tint"] = tint_from_dict(data["tint"] or {})
    if "ceramic" in data:
        updates["ceramic"] = ceramic_from_dict(data["ceramic"] or {})
    if "paintCorrection" in data:
        updates["paint_correction"] = _enum(PaintCorrectionLevel, data["paintCorrection"])
    if "interior" in data:
        updates["interior"] = _enum_tuple(InteriorProtectionOption, data["interior"])
    if "windshield" in data:
        updates["windshield"] = WindshieldConfig(add_ons=_str_tuple((data["windshield"] or {}).get("addOns")))
    if "undercoating" in data:
        updates["undercoating"] = _enum(UndercoatingPackage, data["undercoating"])
    if "detailingNotes" in data:
        updates["detailing_notes"] = _str(data["detailingNotes"])
    if "vehicle" in data:
        updates["vehicle"] = vehicle_from_dict(data["vehicle"] or {})
    if "contact" in data:
        updates["contact"] = contact_from_dict(data["contact"] or {})
    if "promoCodes" in data:
        updates["promo_codes"] = tuple(dict.fromkeys(code.strip().upper() for code in _str_tuple(data["promoCodes"])))
    if "notes" in data:
        updates["notes"] = _str(data["notes"])
    return updates


def quote_state_from_dict(data: dict[str, Any]) -> QuoteState:
    return QuoteState(**partial_from_dict(data))
