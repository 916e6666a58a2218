from __future__ import annotations

from dataclasses import dataclass, field

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


@dataclass(frozen=True)
class PPFConfig:
    film_type: PPFFilmType | None = None
    package: PPFPackage | None = None
    add_ons: tuple[str, ...] = ()
    fashion_color: str | None = None
    is_fusion: bool = False  # XPEL Ultimate Fusion upgrade


@dataclass(frozen=True)
class TintConfig:
    type: TintType | None = None
    package: TintPackage | None = None
    add_ons: tuple[str, ...] = ()


@dataclass(frozen=True)
class CeramicConfig:
    package: CeramicPackage | None = None
    add_ons: tuple[str, ...] = ()


@dataclass(frozen=True)
class WindshieldConfig:
    add_ons: tuple[str, ...] = ()


@dataclass(frozen=True)
class VehicleInfo:
    year: str = ""
    make: str = ""
    model: str = ""
    size: str = ""
    color: str = ""
    timing: str = ""

    def is_complete(self) -> bool:
        return bool(self.year.strip() and self.make.strip() and self.model.strip())


@dataclass(frozen=True)
class ContactInfo:
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    email: str = ""
    method: ContactMethod = ContactMethod.TEXT

    def is_complete(self) -> bool:
        return bool(
            self.first_name.strip()
            and self.last_name.strip()
            and self.phone.strip()
            and self.email.strip()
        )


@dataclass(frozen=True)
class QuoteState:
    # Tuples keep selection order for display; membership drives all logic.
    services: tuple[ServiceType, ...] = ()
    ppf: PPFConfig = field(default_factory=PPFConfig)
    tint: TintConfig = field(default_factory=TintConfig)
    ceramic: CeramicConfig = field(default_factory=CeramicConfig)
    paint_correction: PaintCorrectionLevel | None = None
    interior: tuple[InteriorProtectionOption, ...] = ()
    windshield: WindshieldConfig = field(default_factory=WindshieldConfig)
    undercoating: UndercoatingPackage | None = None
    detailing_notes: str = ""
    vehicle: VehicleInfo = field(default_factory=VehicleInfo)
    contact: ContactInfo = field(default_factory=ContactInfo)
    promo_codes: tuple[str, ...] = ()
    notes: str = ""

    def has_service(self, service: ServiceType) -> bool:
        return service in self.services
