from __future__ import annotations

from dataclasses import replace

import pytest

from app.application.use_cases.promo_analysis import (
    analyze_promos,
    free_addon_update,
    is_dark_color,
    is_new_vehicle,
)
from app.domain.entities.opportunity import OpportunityKind
from app.domain.entities.quote_state import PPFConfig, QuoteState, VehicleInfo
from app.domain.entities.services import (
    InteriorProtectionOption,
    PPFPackage,
    ServiceType,
)


def _ppf_state(package: PPFPackage | None, *extra: ServiceType, **changes) -> QuoteState:
    return QuoteState(
        services=(ServiceType.PPF, *extra),
        ppf=PPFConfig(package=package),
        vehicle=VehicleInfo(year="2019", make="Audi", model="RS5", color="White"),
        **changes,
    )


def test_gold_without_ceramic_offers_gold_bundle():
    codes = [o.code for o in analyze_promos(_ppf_state(PPFPackage.GOLD))]
    assert "CERAMICGOLD30" in codes


def test_rule_order_is_stable():
    state = _ppf_state(PPFPackage.SILVER)
    state = replace(state, vehicle=replace(state.vehicle, year="2025"))
    codes = [o.code for o in analyze_promos(state)]
    assert codes == ["FREEADDON25", "CERAMICSILVER20", "TINTBUNDLE10", "INTERIOR10"]


def test_free_addon_only_for_partial_and_full_front():
    for package in (PPFPackage.BRONZE, PPFPackage.SILVER, PPFPackage.GOLD):
        offers = analyze_promos(_ppf_state(package))
        assert offers[0].kind is OpportunityKind.FREE_ADDON
        assert offers[0].eligible_addons == ("Door cups", "Door edges", "Luggage strip")
    for package in (PPFPackage.TRACK, PPFPackage.DIAMOND):
        assert all(o.kind is not OpportunityKind.FREE_ADDON for o in analyze_promos(_ppf_state(package)))


def test_ceramic_bundle_by_tier():
    assert [o.code for o in analyze_promos(_ppf_state(PPFPackage.DIAMOND)) if o.service_to_enable is ServiceType.CERAMIC] == [
        "CERAMICPLUS50"
    ]
    assert not [o for o in analyze_promos(_ppf_state(PPFPackage.BRONZE)) if o.service_to_enable is ServiceType.CERAMIC]
    assert not [o for o in analyze_promos(_ppf_state(PPFPackage.TRACK)) if o.service_to_enable is ServiceType.CERAMIC]


def test_no_ppf_package_means_no_ppf_offers():
    assert analyze_promos(_ppf_state(None)) == []


def test_ppf_config_without_service_is_ignored():
    state = QuoteState(services=(ServiceType.DETAILING,), ppf=PPFConfig(package=PPFPackage.GOLD))
    assert analyze_promos(state) == []


def test_selected_services_suppress_their_upsells():
    offers = analyze_promos(_ppf_state(PPFPackage.GOLD, ServiceType.CERAMIC, ServiceType.TINT))
    assert [o.code for o in offers] == ["FREEADDON25"]


def test_new_vehicle_interior_offer():
    state = QuoteState(services=(ServiceType.DETAILING,), vehicle=VehicleInfo(year="2024", make="Kia", model="EV9"))
    offers = analyze_promos(state)
    assert [o.code for o in offers] == ["INTERIOR10"]
    assert offers[0].service_to_enable is ServiceType.INTERIOR
    assert "2024" in offers[0].reason

    with_tint = replace(state, services=(ServiceType.DETAILING, ServiceType.TINT))
    assert analyze_promos(with_tint) == []

    older = replace(state, vehicle=replace(state.vehicle, year="2021"))
    assert analyze_promos(older) == []


def test_new_vehicle_threshold_is_configurable():
    state = QuoteState(vehicle=VehicleInfo(year="2023"))
    assert not is_new_vehicle(state)
    assert is_new_vehicle(state, new_vehicle_year=2023)
    assert not is_new_vehicle(QuoteState(vehicle=VehicleInfo(year="unknown")))


def test_ceramic_reason_prefers_dark_paint():
    dark = _ppf_state(PPFPackage.GOLD)
    dark = replace(dark, vehicle=replace(dark.vehicle, color="Midnight Blue"))
    offer = next(o for o in analyze_promos(dark) if o.code == "CERAMICGOLD30")
    assert offer.reason.startswith("Dark paint on your RS5")

    full_wrap = next(o for o in analyze_promos(_ppf_state(PPFPackage.DIAMOND)) if o.code == "CERAMICPLUS50")
    assert full_wrap.reason.startswith("Since you're wrapping the whole car")

    generic = next(o for o in analyze_promos(_ppf_state(PPFPackage.SILVER)) if o.code == "CERAMICSILVER20")
    assert generic.reason.startswith("Ceramic seals the porous PPF surface")


def test_tint_reason_mentions_leather():
    state = _ppf_state(PPFPackage.GOLD, interior=(InteriorProtectionOption.LEATHER,))
    offer = next(o for o in analyze_promos(state) if o.code == "TINTBUNDLE10")
    assert "Leather Protection" in offer.reason


def test_dark_color_keywords():
    assert is_dark_color("Carbon Black Metallic")
    assert is_dark_color("GRAY")
    assert not is_dark_color("Pearl White")
    assert not is_dark_color("")


def test_free_addon_keeps_a_single_eligible_zone():
    state = _ppf_state(PPFPackage.GOLD)
    state = replace(state, ppf=replace(state.ppf, add_ons=("Grille",)))
    offer = analyze_promos(state)[0]

    update = free_addon_update(state, offer, "Door cups")
    state = replace(state, **update)
    assert state.ppf.add_ons == ("Grille", "Door cups")
    assert state.promo_codes == ("FREEADDON25",)

    update = free_addon_update(state, offer, "Luggage strip")
    state = replace(state, **update)
    assert state.ppf.add_ons == ("Grille", "Luggage strip")
    assert "promo_codes" not in update


def test_free_addon_rejects_other_zones():
    state = _ppf_state(PPFPackage.BRONZE)
    offer = analyze_promos(state)[0]
    with pytest.raises(ValueError):
        free_addon_update(state, offer, "Grille")
