from __future__ import annotations

import re
from dataclasses import replace
from typing import Any

from app.domain.entities.opportunity import Opportunity, OpportunityKind
from app.domain.entities.quote_state import QuoteState
from app.domain.entities.services import (
    InteriorProtectionOption,
    PPFPackage,
    ServiceType,
    label_for,
)


FREE_ADDON_CODE = "FREEADDON25"
FREE_ADDON_ZONES: tuple[str, ...] = ("Door cups", "Door edges", "Luggage strip")
FREE_ADDON_PACKAGES = frozenset({PPFPackage.BRONZE, PPFPackage.SILVER, PPFPackage.GOLD})

# PPF tier -> (discount, code). Tiers missing here get no ceramic bundle.
CERAMIC_BUNDLES: dict[PPFPackage, tuple[str, str]] = {
    PPFPackage.GOLD: ("30%", "CERAMICGOLD30"),
    PPFPackage.SILVER: ("20%", "CERAMICSILVER20"),
    PPFPackage.DIAMOND: ("50%", "CERAMICPLUS50"),
}

TINT_BUNDLE_CODE = "TINTBUNDLE10"
INTERIOR_CODE = "INTERIOR10"

DARK_COLOR_KEYWORDS: tuple[str, ...] = (
    "black", "blue", "grey", "gray", "green", "red", "midnight", "obsidian", "carbon", "charcoal",
)

DEFAULT_NEW_VEHICLE_YEAR = 2024

_LEADING_INT = re.compile(r"\s*(\d+)")


def _vehicle_year(state: QuoteState) -> int | None:
    match = _LEADING_INT.match(state.vehicle.year or "")
    return int(match.group(1)) if match else None


def is_dark_color(color: str) -> bool:
    lowered = (color or "").lower()
    return any(keyword in lowered for keyword in DARK_COLOR_KEYWORDS)


def is_new_vehicle(state: QuoteState, new_vehicle_year: int = DEFAULT_NEW_VEHICLE_YEAR) -> bool:
    year = _vehicle_year(state)
    return year is not None and year >= new_vehicle_year


def ceramic_reason(state: QuoteState) -> str:
    """Pick the ceramic pitch: dark paint, then track use, then full wrap, then generic."""
    model = state.vehicle.model or "vehicle"
    if is_dark_color(state.vehicle.color):
        return (
            f"Dark paint on your {model} shows swirls easily. Ceramic coating adds a hard "
            "sacrificial layer to prevent wash-induced marring."
        )
    if state.ppf.package is PPFPackage.TRACK:
        return (
            "Track use exposes the car to rubber and hot brake dust. Ceramic coating prevents "
            "these contaminants from bonding to the PPF."
        )
    if state.ppf.package is PPFPackage.DIAMOND:
        return (
            "Since you're wrapping the whole car, Ceramic Coating will keep the film hydrophobic "
            "and looking cleaner for longer."
        )
    return "Ceramic seals the porous PPF surface, extending its life and making washing effortless."


def tint_reason(state: QuoteState, new_vehicle_year: int = DEFAULT_NEW_VEHICLE_YEAR) -> str:
    if InteriorProtectionOption.LEATHER in state.interior:
        return (
            "Since you selected Leather Protection, Window Tint is the perfect partner to block UV "
            "rays that dry out and crack leather over time."
        )
    if is_new_vehicle(state, new_vehicle_year):
        return (
            f"Keep your {state.vehicle.year} interior looking brand new by blocking 99% of damaging "
            "UV rays right from day one."
        )
    return "Protect your interior from UV rays and heat while the car is already in the shop."


def analyze_promos(
    state: QuoteState,
    new_vehicle_year: int = DEFAULT_NEW_VEHICLE_YEAR,
) -> list[Opportunity]:
    """
    Contextual offers for an in-progress quote.

    Rules run in a fixed order and that order is the order of the result:
    free PPF zone, ceramic bundle, tint bundle, new-vehicle interior.
    """
    opportunities: list[Opportunity] = []
    package = state.ppf.package
    has_ppf = state.has_service(ServiceType.PPF) and package is not None
    has_ceramic = state.has_service(ServiceType.CERAMIC)
    has_tint = state.has_service(ServiceType.TINT)
    package_label = label_for(package)

    if has_ppf and package in FREE_ADDON_PACKAGES:
        opportunities.append(
            Opportunity(
                kind=OpportunityKind.FREE_ADDON,
                title="Claim Your Free PPF Zone",
                description="Your package qualifies for one free protection zone.",
                reason=(
                    f"As a thank you for choosing the {package_label} package, we include high-wear "
                    "areas like Door Cups or Edges at no extra cost to prevent common scratches."
                ),
                code=FREE_ADDON_CODE,
                eligible_addons=FREE_ADDON_ZONES,
            )
        )

    if has_ppf and not has_ceramic and package in CERAMIC_BUNDLES:
        discount, code = CERAMIC_BUNDLES[package]
        opportunities.append(
            Opportunity(
                kind=OpportunityKind.UPSELL,
                title=f"Add Ceramic & Save {discount}",
                description=f"Bundle Ceramic Coating with your {package_label} to unlock huge savings.",
                reason=ceramic_reason(state),
                code=code,
                service_to_enable=ServiceType.CERAMIC,
            )
        )

    if has_ppf and not has_tint:
        opportunities.append(
            Opportunity(
                kind=OpportunityKind.UPSELL,
                title="Add Tint - Save 10%",
                description="Complete the look and save 10% on Window Tinting when bundled.",
                reason=tint_reason(state, new_vehicle_year),
                code=TINT_BUNDLE_CODE,
                service_to_enable=ServiceType.TINT,
            )
        )

    if (
        is_new_vehicle(state, new_vehicle_year)
        and not state.has_service(ServiceType.INTERIOR)
        and not has_tint
    ):
        opportunities.append(
            Opportunity(
                kind=OpportunityKind.UPSELL,
                title="New Car Interior Defense",
                description="Keep that new car look and smell.",
                reason=(
                    f"For brand new {state.vehicle.year} models, sealing the interior surfaces now "
                    "prevents dye transfer and stains from ever setting in."
                ),
                code=INTERIOR_CODE,
                service_to_enable=ServiceType.INTERIOR,
            )
        )

    return opportunities


def free_addon_update(state: QuoteState, opportunity: Opportunity, zone: str) -> dict[str, Any]:
    """
    Store update for claiming a free zone.

    Only one eligible zone is free, so any previously claimed eligible zone is
    dropped before the new one is added. The promo code is appended once.
    """
    eligible = opportunity.eligible_addons or ()
    if zone not in eligible:
        raise ValueError(f"{zone!r} is not eligible for {opportunity.code}")

    add_ons = [a for a in state.ppf.add_ons if a not in eligible]
    add_ons.append(zone)

    update: dict[str, Any] = {"ppf": replace(state.ppf, add_ons=tuple(add_ons))}
    if opportunity.code not in state.promo_codes:
        update["promo_codes"] = state.promo_codes + (opportunity.code,)
    return update
