from __future__ import annotations

from typing import Callable

from app.domain.entities.quote_state import QuoteState
from app.domain.entities.services import PPFFilmType, ServiceType
from app.domain.entities.wizard_step import WizardStep


def _ppf_steps(state: QuoteState) -> list[WizardStep]:
    steps = [WizardStep.PPF_TYPE]
    if state.ppf.film_type is PPFFilmType.FASHION:
        steps.append(WizardStep.PPF_COLOR)
    steps.append(WizardStep.PPF_PACKAGE)
    # Always present; a full wrap renders it as "nothing to add".
    steps.append(WizardStep.PPF_ADDONS)
    return steps


def _fixed(*steps: WizardStep) -> Callable[[QuoteState], list[WizardStep]]:
    return lambda _state: list(steps)


# Canonical service order. It defines step numbering, so it must not change.
SERVICE_BLOCKS: tuple[tuple[ServiceType, Callable[[QuoteState], list[WizardStep]]], ...] = (
    (ServiceType.PPF, _ppf_steps),
    (ServiceType.TINT, _fixed(WizardStep.TINT_TYPE, WizardStep.TINT_PACKAGE, WizardStep.TINT_ADDONS)),
    (ServiceType.CERAMIC, _fixed(WizardStep.CERAMIC_PACKAGE, WizardStep.CERAMIC_ADDONS)),
    (ServiceType.PAINT_CORRECTION, _fixed(WizardStep.PAINT_CORRECTION)),
    (ServiceType.INTERIOR, _fixed(WizardStep.INTERIOR)),
    (ServiceType.WINDSHIELD, _fixed(WizardStep.WINDSHIELD)),
    (ServiceType.UNDERCOATING, _fixed(WizardStep.UNDERCOATING)),
    (ServiceType.DETAILING, _fixed(WizardStep.DETAILING)),
)

TRAILING_STEPS: tuple[WizardStep, ...] = (
    WizardStep.VEHICLE,
    WizardStep.CONTACT,
    WizardStep.ANALYSIS,
    WizardStep.REVIEW,
)

# Last sub-step of every optional service block.
SERVICE_END_STEPS: frozenset[WizardStep] = frozenset(
    {
        WizardStep.PPF_ADDONS,
        WizardStep.TINT_ADDONS,
        WizardStep.CERAMIC_ADDONS,
        WizardStep.PAINT_CORRECTION,
        WizardStep.INTERIOR,
        WizardStep.WINDSHIELD,
        WizardStep.UNDERCOATING,
        WizardStep.DETAILING,
    }
)


def build_steps(state: QuoteState) -> list[WizardStep]:
    """Ordered wizard steps for a state. Pure: equal input gives an equal list."""
    steps = [WizardStep.SERVICES]
    for service, block in SERVICE_BLOCKS:
        if state.has_service(service):
            steps.extend(block(state))
    steps.extend(TRAILING_STEPS)
    return steps


def first_step_for(service: ServiceType, state: QuoteState) -> WizardStep:
    """First configuration step of a service block."""
    for block_service, block in SERVICE_BLOCKS:
        if block_service is service:
            return block(state)[0]
    raise ValueError(f"Unknown service: {service}")
