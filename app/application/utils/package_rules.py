from __future__ import annotations

from dataclasses import replace

from app.domain.entities.quote_state import PPFConfig
from app.domain.entities.services import CeramicPackage, PPFFilmType, PPFPackage, label_for


PPF_ZONES: tuple[str, ...] = (
    "Grille",
    "Headlights",
    "A pillars",
    "Roofline",
    "Door edges",
    "Door cups",
    "Door sills",
    "Luggage strip",
    "Rocker panels",
    "Tailgate",
    "Rear bumper only",
    "Black Piano Pillars",
    "Rear wheel splash area",
    "Interior black trim",
    "Interior screen",
)

PPF_ZONE_DESCRIPTIONS: dict[str, str] = {
    "Grille": "Protects the front grille slats and surround from direct impact.",
    "Headlights": "Prevents fogging, pitting, and cracking from road debris.",
    "A pillars": "Covers the vertical pillars on either side of the windshield.",
    "Roofline": "Protects the leading edge of the roof above the windshield.",
    "Door edges": "Shields the very edge of doors from chips when opening.",
    "Door cups": "Prevents scratches from fingernails and rings behind handles.",
    "Door sills": "Protects the entry step area from shoe scuffs.",
    "Luggage strip": "Protects the top of the rear bumper when loading cargo.",
    "Rocker panels": "Covers lower side panels highly vulnerable to road spray.",
    "Tailgate": "Protects the rear hatch or trunk lid surface.",
    "Rear bumper only": "Complete protection for the painted rear bumper surface.",
    "Black Piano Pillars": "Prevents swirl marks on delicate gloss black trim pieces.",
    "Rear wheel splash area": "Protects the paint behind the rear wheels from gravel rash.",
    "Interior black trim": "Protects glossy interior consoles from scratches.",
    "Interior screen": "Protects infotainment screens from fingerprints and scratches.",
}

PPF_PACKAGE_DESCRIPTIONS: dict[PPFPackage, str] = {
    PPFPackage.BRONZE: "Entry-level protection for the leading 24\" of the hood and fenders. Prevents common stone chips.",
    PPFPackage.SILVER: "Adds full bumper protection to the Bronze pack. Ideal for city driving.",
    PPFPackage.GOLD: "Our standard for complete front-end peace of mind. Full hood and fenders mean NO visible seams.",
    PPFPackage.TRACK: "Gold package + Rocker Panels. Essential for gravel roads, track days, or sticky tires.",
    PPFPackage.DIAMOND: "The ultimate solution. Every painted surface is wrapped. Change the color or freeze it in time.",
}

_PPF_INCLUDED_ZONES: dict[PPFPackage, tuple[str, ...]] = {
    PPFPackage.BRONZE: ('24" hood & fenders', "Mirrors"),
    PPFPackage.SILVER: ("Front bumper", '24" hood & fenders', "Mirrors"),
    PPFPackage.GOLD: (
        "Front bumper", "Full hood", "Full fenders", "Mirrors", "Headlights", "A pillars", "Roofline",
    ),
    PPFPackage.TRACK: (
        "Front bumper", "Full hood", "Full fenders", "Mirrors", "Headlights", "A pillars", "Roofline",
        "Rocker panels",
    ),
    PPFPackage.DIAMOND: (
        "Full hood", "Full fenders", "Front bumper", "Mirrors", "Headlights", "Doors", "Tailgate",
        "Rear bumper", "Roof", "Pillars", "Rear quarter panel", "Rocker panels",
    ),
}

FASHION_COLORS: tuple[str, ...] = (
    "Molten Orange",
    "Monza Red",
    "Satin Thermal Beige",
    "Satin Battle Green",
    "Moss Green",
    "South Beach Blue",
    "Satin Abyss Blue",
    "Ultra Plum",
    "Bond Silver",
    "Heritage Grey",
    "Satin Tarmac",
    "Obsidian Black",
    "Satin Midnight Black",
    "Grey Black",
    "Pearl White",
    "XPEL Yellow",
)

TINT_ADDONS: tuple[str, ...] = ("Front Windshield (Full)", "Sunstrip (Visor Strip)")

WINDSHIELD_OPTIONS: tuple[str, ...] = ("Rock chip repair (before film)", "Windshield ceramic coating")

WINDSHIELD_DESCRIPTIONS: dict[str, str] = {
    "Rock chip repair (before film)": "Fill existing pits/chips so the film lays flat.",
    "Windshield ceramic coating": "Adds water beading on top of the film for clarity.",
}

CERAMIC_ADDONS: tuple[str, ...] = (
    "Fabric protection",
    "Leather protection",
    "Interior plastic trim",
    "Full interior coating",
    "Wheels off coating",
    "Caliper coating",
    "Wheel face coating",
    "Windshield coating",
    "All glass coating",
)

CERAMIC_ADDON_DESCRIPTIONS: dict[str, str] = {
    "Fabric protection": "Hydrophobic barrier for seats/carpets to prevent stains.",
    "Leather protection": "Resists dye transfer (jeans) and UV fading.",
    "Interior plastic trim": "Protects dash and panels from UV fading and dust.",
    "Full interior coating": "Complete protection for all leather, fabric, and plastic.",
    "Wheels off coating": "Coats the inner barrel and caliper, not just the face.",
    "Caliper coating": "Makes cleaning brake dust effortless.",
    "Wheel face coating": "Protects the visible face of rims from brake dust.",
    "Windshield coating": "Hydrophobic layer for extreme water beading in rain.",
    "All glass coating": "Improves visibility on all windows and mirrors.",
}

_CERAMIC_INCLUDED_ADDONS: dict[CeramicPackage, tuple[str, ...]] = {
    CeramicPackage.PLUS: (),
    CeramicPackage.PREMIUM: ("Wheel face coating",),
    CeramicPackage.SUPREME: ("Wheel face coating", "Windshield coating", "Interior plastic trim"),
}


def ppf_included_zones(package: PPFPackage | None) -> tuple[str, ...]:
    if package is None:
        return ()
    return _PPF_INCLUDED_ZONES.get(package, ())


def available_ppf_addons(package: PPFPackage | None) -> tuple[str, ...]:
    """Add-on zones that the package does not already cover. Full wrap leaves nothing to add."""
    if package is PPFPackage.DIAMOND:
        return ()
    included = ppf_included_zones(package)
    return tuple(zone for zone in PPF_ZONES if zone not in included)


def allowed_ppf_packages(film_type: PPFFilmType | None) -> tuple[PPFPackage, ...]:
    if film_type is PPFFilmType.STEALTH:
        return (PPFPackage.GOLD, PPFPackage.DIAMOND)
    if film_type is PPFFilmType.FASHION:
        # Color-change film needs the full wrap so no original paint shows.
        return (PPFPackage.DIAMOND,)
    return tuple(PPFPackage)


def apply_film_type(ppf: PPFConfig, film_type: PPFFilmType) -> PPFConfig:
    """Switch film type and keep the package inside the tiers that film allows."""
    package = ppf.package
    if film_type is PPFFilmType.FASHION:
        package = PPFPackage.DIAMOND
    elif package is not None and package not in allowed_ppf_packages(film_type):
        package = None
    return replace(ppf, film_type=film_type, package=package)


def ceramic_included_addons(package: CeramicPackage | None) -> tuple[str, ...]:
    if package is None:
        return ()
    return _CERAMIC_INCLUDED_ADDONS.get(package, ())


def available_ceramic_addons(package: CeramicPackage | None) -> tuple[str, ...]:
    included = ceramic_included_addons(package)
    return tuple(addon for addon in CERAMIC_ADDONS if addon not in included)


def normalize_ppf(ppf: PPFConfig) -> PPFConfig:
    """
    Check a submitted PPF block against its film type.

    A tier the film does not allow raises ValueError; otherwise the film-type
    coupling is applied (Fashion always lands on the full wrap).
    """
    if ppf.film_type is None:
        return ppf
    if ppf.package is not None and ppf.package not in allowed_ppf_packages(ppf.film_type):
        raise ValueError(
            f"{label_for(ppf.package)} is not available with {label_for(ppf.film_type)} film."
        )
    return apply_film_type(ppf, ppf.film_type)
