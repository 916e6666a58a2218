from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.entities.opportunity import OpportunityKind
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
from app.domain.entities.wizard_step import WizardPhase, WizardStep


class CamelSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PPFSchema(CamelSchema):
    film_type: PPFFilmType | None = None
    package: PPFPackage | None = None
    add_ons: list[str] = Field(default_factory=list)
    fashion_color: str | None = None
    is_fusion: bool = False


class TintSchema(CamelSchema):
    type: TintType | None = None
    package: TintPackage | None = None
    add_ons: list[str] = Field(default_factory=list)


class CeramicSchema(CamelSchema):
    package: CeramicPackage | None = None
    add_ons: list[str] = Field(default_factory=list)


class WindshieldSchema(CamelSchema):
    add_ons: list[str] = Field(default_factory=list)


class VehicleSchema(CamelSchema):
    year: str = ""
    make: str = ""
    model: str = ""
    size: str = ""
    color: str = ""
    timing: str = ""


class ContactSchema(CamelSchema):
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    email: str = ""
    method: ContactMethod = ContactMethod.TEXT


class QuotePatchSchema(CamelSchema):
    """Top-level keys to merge. A nested block replaces the stored block whole."""

    services: list[ServiceType] | None = None
    ppf: PPFSchema | None = None
    tint: TintSchema | None = None
    ceramic: CeramicSchema | None = None
    paint_correction: PaintCorrectionLevel | None = None
    interior: list[InteriorProtectionOption] | None = None
    windshield: WindshieldSchema | None = None
    undercoating: UndercoatingPackage | None = None
    detailing_notes: str | None = None
    vehicle: VehicleSchema | None = None
    contact: ContactSchema | None = None
    notes: str | None = None


class OpportunitySchema(CamelSchema):
    kind: OpportunityKind
    title: str
    description: str
    reason: str
    code: str
    eligible_addons: list[str] | None = None
    service_to_enable: ServiceType | None = None


class WizardViewSchema(CamelSchema):
    phase: WizardPhase
    step: WizardStep
    step_index: int
    steps: list[WizardStep]
    state: dict[str, Any]
    validation_error: str | None = None
    promo_error: str | None = None
    promo_message: str | None = None
    opportunities: list[OpportunitySchema] = Field(default_factory=list)
    submission_error: str | None = None
    is_submitting: bool = False


class JumpRequestSchema(CamelSchema):
    service: ServiceType
    start_step: WizardStep | None = None


class StartOverRequestSchema(CamelSchema):
    confirm: bool = False


class PromoCodeRequestSchema(CamelSchema):
    code: str


class FilmTypeRequestSchema(CamelSchema):
    film_type: PPFFilmType


class FreeAddonRequestSchema(CamelSchema):
    zone: str
