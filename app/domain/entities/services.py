from __future__ import annotations

from enum import Enum


class ServiceType(str, Enum):
    PPF = "ppf"
    TINT = "tint"
    CERAMIC = "ceramic"
    PAINT_CORRECTION = "paint_correction"
    INTERIOR = "interior"
    WINDSHIELD = "windshield"
    UNDERCOATING = "undercoating"
    DETAILING = "detailing"


class PPFFilmType(str, Enum):
    CLEAR = "clear"
    STEALTH = "stealth"
    FASHION = "fashion"


class PPFPackage(str, Enum):
    BRONZE = "bronze"  # partial front
    SILVER = "silver"  # partial front + bumper
    GOLD = "gold"  # full front
    TRACK = "track"
    DIAMOND = "diamond"  # full wrap


class TintType(str, Enum):
    CS = "cs"
    XR = "xr"


class TintPackage(str, Enum):
    TWO = "two"
    THREE = "three"
    FIVE = "five"
    SEVEN = "seven"


class CeramicPackage(str, Enum):
    PLUS = "plus"
    PREMIUM = "premium"
    SUPREME = "supreme"


class PaintCorrectionLevel(str, Enum):
    STAGE_1 = "stage_1"
    STAGE_2 = "stage_2"
    STAGE_3 = "stage_3"


class InteriorProtectionOption(str, Enum):
    LEATHER = "leather"
    FABRIC = "fabric"
    TRIM = "trim"


class UndercoatingPackage(str, Enum):
    UNDERCOATING = "undercoating"
    RUSTPROOFING = "rustproofing"
    COMPLETE = "complete"


class ContactMethod(str, Enum):
    TEXT = "Text"
    CALL = "Call"
    EMAIL = "Email"


# Presentation labels, one table per enum. Logic never compares against these strings.
SERVICE_LABELS: dict[ServiceType, str] = {
    ServiceType.PPF: "Paint Protection Film (PPF)",
    ServiceType.TINT: "Window Tint",
    ServiceType.CERAMIC: "Ceramic Coating",
    ServiceType.PAINT_CORRECTION: "Paint Correction",
    ServiceType.INTERIOR: "Interior Protection",
    ServiceType.WINDSHIELD: "Windshield Protection",
    ServiceType.UNDERCOATING: "Undercoating & Rustproofing",
    ServiceType.DETAILING: "Detailing",
}

LABELS: dict[type[Enum], dict] = {
    ServiceType: SERVICE_LABELS,
    PPFFilmType: {
        PPFFilmType.CLEAR: "Clear (Gloss)",
        PPFFilmType.STEALTH: "Stealth (Satin)",
        PPFFilmType.FASHION: "Fashion (Color)",
    },
    PPFPackage: {
        PPFPackage.BRONZE: "Bronze (Partial Front)",
        PPFPackage.SILVER: "Silver (Partial Front + Bumper)",
        PPFPackage.GOLD: "Gold (Full Front)",
        PPFPackage.TRACK: "Track Pack",
        PPFPackage.DIAMOND: "Diamond (Full Wrap)",
    },
    TintType: {
        TintType.CS: "XPEL Prime CS (Color Stable)",
        TintType.XR: "XPEL Prime XR (Nano-Ceramic)",
    },
    TintPackage: {
        TintPackage.TWO: "2 Windows (Front Matches)",
        TintPackage.THREE: "3 Windows (Rear Coupe/Truck)",
        TintPackage.FIVE: "5 Windows (Full Sedan)",
        TintPackage.SEVEN: "7 Windows (Full SUV)",
    },
    CeramicPackage: {
        CeramicPackage.PLUS: "Plus (4-Year)",
        CeramicPackage.PREMIUM: "Premium (8-Year)",
        CeramicPackage.SUPREME: "Supreme (8-Year Multi-Layer)",
    },
    PaintCorrectionLevel: {
        PaintCorrectionLevel.STAGE_1: "Stage 1 (Enhancement)",
        PaintCorrectionLevel.STAGE_2: "Stage 2 (Correction)",
        PaintCorrectionLevel.STAGE_3: "Stage 3 (Restoration)",
    },
    InteriorProtectionOption: {
        InteriorProtectionOption.LEATHER: "Leather Protection",
        InteriorProtectionOption.FABRIC: "Fabric Protection",
        InteriorProtectionOption.TRIM: "Trim & Console Protection",
    },
    UndercoatingPackage: {
        UndercoatingPackage.UNDERCOATING: "Undercoating only",
        UndercoatingPackage.RUSTPROOFING: "Rustproofing only",
        UndercoatingPackage.COMPLETE: "Complete package (both)",
    },
}

STEALTH_PACKAGE_LABELS: dict[PPFPackage, str] = {
    PPFPackage.GOLD: "Front End Protection (For Matte Cars)",
    PPFPackage.DIAMOND: "Full Stealth Conversion",
}


def label_for(value: Enum | None, film_type: PPFFilmType | None = None) -> str:
    """Display label for an enum tag; stealth film renames two PPF tiers."""
    if value is None:
        return ""
    if film_type is PPFFilmType.STEALTH and isinstance(value, PPFPackage):
        stealth_label = STEALTH_PACKAGE_LABELS.get(value)
        if stealth_label:
            return stealth_label
    return LABELS.get(type(value), {}).get(value, str(value.value))
