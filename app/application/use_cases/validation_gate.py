from __future__ import annotations

from typing import Callable

from app.domain.entities.quote_state import QuoteState
from app.domain.entities.validation import ValidationResult
from app.domain.entities.wizard_step import WizardStep


Rule = tuple[Callable[[QuoteState], bool], str]

# Steps missing from this table are optional and always pass.
VALIDATION_RULES: dict[WizardStep, Rule] = {
    WizardStep.SERVICES: (
        lambda s: len(s.services) > 0,
        "Please select at least one service.",
    ),
    WizardStep.PPF_TYPE: (
        lambda s: s.ppf.film_type is not None,
        "Please select a PPF Film Type.",
    ),
    WizardStep.PPF_COLOR: (
        lambda s: bool(s.ppf.fashion_color),
        "Please select a color.",
    ),
    WizardStep.PPF_PACKAGE: (
        lambda s: s.ppf.package is not None,
        "Please select a PPF package.",
    ),
    WizardStep.TINT_TYPE: (
        lambda s: s.tint.type is not None,
        "Please select a Tint Type.",
    ),
    WizardStep.TINT_PACKAGE: (
        lambda s: s.tint.package is not None,
        "Please select a Tint Package.",
    ),
    WizardStep.CERAMIC_PACKAGE: (
        lambda s: s.ceramic.package is not None,
        "Please select a Ceramic package.",
    ),
    WizardStep.PAINT_CORRECTION: (
        lambda s: s.paint_correction is not None,
        "Please select a paint correction level.",
    ),
    WizardStep.INTERIOR: (
        lambda s: len(s.interior) > 0,
        "Please select at least one interior option or go back.",
    ),
    WizardStep.UNDERCOATING: (
        lambda s: s.undercoating is not None,
        "Please select an undercoating option.",
    ),
    WizardStep.VEHICLE: (
        lambda s: s.vehicle.is_complete(),
        "Please complete required vehicle details.",
    ),
    WizardStep.CONTACT: (
        lambda s: s.contact.is_complete(),
        "Please complete all contact fields.",
    ),
}


def validate_step(step: WizardStep, state: QuoteState) -> ValidationResult:
    rule = VALIDATION_RULES.get(step)
    if rule is None:
        return ValidationResult.proceed()
    predicate, message = rule
    if predicate(state):
        return ValidationResult.proceed()
    return ValidationResult.fail(message)
