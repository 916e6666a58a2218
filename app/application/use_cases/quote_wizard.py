from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from app.application.exceptions import (
    InvalidStepError,
    LeadSubmissionError,
    PromoCodeError,
    SubmissionInProgressError,
)
from app.application.ports.scheduler import ScheduledTask, SchedulerPort
from app.application.use_cases.promo_analysis import (
    DEFAULT_NEW_VEHICLE_YEAR,
    analyze_promos,
    free_addon_update,
)
from app.application.use_cases.quote_store import QuoteStore
from app.application.use_cases.step_graph import SERVICE_END_STEPS, build_steps, first_step_for
from app.application.use_cases.submit_lead import SubmitLeadUseCase
from app.application.use_cases.validation_gate import validate_step
from app.application.utils.package_rules import apply_film_type, normalize_ppf
from app.domain.entities.opportunity import Opportunity, OpportunityKind
from app.domain.entities.quote_state import QuoteState
from app.domain.entities.services import PPFFilmType, ServiceType
from app.domain.entities.wizard_step import WizardPhase, WizardStep


SUBMISSION_FAILED_MESSAGE = "Something went wrong. Please try again."


@dataclass(frozen=True)
class WizardSnapshot:
    phase: WizardPhase
    step: WizardStep
    step_index: int
    steps: tuple[WizardStep, ...]
    state: QuoteState
    validation_error: str | None
    promo_error: str | None
    promo_message: str | None
    opportunities: tuple[Opportunity, ...]
    submission_error: str | None
    is_submitting: bool


class QuoteWizard:
    """
    Navigation controller for the quote wizard.

    Holds the current step index over a step graph that is rebuilt from the
    store on every mutation. Entering ANALYSIS schedules the promotion
    analysis; that timer (and the follow-up auto-advance) is cancelled as soon
    as the step changes or the wizard is closed.
    """

    def __init__(
        self,
        store: QuoteStore,
        scheduler: SchedulerPort,
        submit_lead: SubmitLeadUseCase,
        analysis_delay_seconds: float = 3.0,
        auto_advance_delay_seconds: float = 1.0,
        new_vehicle_year: int = DEFAULT_NEW_VEHICLE_YEAR,
    ) -> None:
        self._store = store
        self._scheduler = scheduler
        self._submit_lead = submit_lead
        self._analysis_delay = analysis_delay_seconds
        self._auto_advance_delay = auto_advance_delay_seconds
        self._new_vehicle_year = new_vehicle_year
        self._logger = logging.getLogger(__name__)

        self._steps: list[WizardStep] = build_steps(store.get())
        self._index = 0
        self._analysis_task: ScheduledTask | None = None
        self._advance_task: ScheduledTask | None = None
        self._suspend_step_hook = False

        self.validation_error: str | None = None
        self.promo_error: str | None = None
        self.promo_message: str | None = None
        self.submission_error: str | None = None
        self.opportunities: list[Opportunity] = []
        self.is_analyzing = False
        self.is_submitting = False
        self.is_success = False

        store.subscribe(self._on_state_changed)

    @property
    def state(self) -> QuoteState:
        return self._store.get()

    @property
    def steps(self) -> list[WizardStep]:
        return list(self._steps)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_step(self) -> WizardStep:
        return self._steps[self._index]

    @property
    def phase(self) -> WizardPhase:
        if self.is_success:
            return WizardPhase.SUCCESS
        if self.is_submitting:
            return WizardPhase.SUBMITTING
        if self.current_step is WizardStep.REVIEW:
            return WizardPhase.REVIEWING
        if self.current_step is WizardStep.ANALYSIS and self.is_analyzing:
            return WizardPhase.ANALYZING
        return WizardPhase.ACTIVE

    # --- state mutation entry points ---

    def update(self, partial: dict[str, Any]) -> QuoteState:
        """Merge customer edits. A PPF tier the chosen film does not allow raises ValueError."""
        if partial.get("ppf") is not None:
            partial = {**partial, "ppf": normalize_ppf(partial["ppf"])}
        return self._store.merge(partial)

    def set_film_type(self, film_type: PPFFilmType) -> QuoteState:
        return self._store.merge({"ppf": apply_film_type(self.state.ppf, film_type)})

    def apply_promo_code(self, code: str) -> bool:
        try:
            promo = self._store.add_promo_code(code)
        except PromoCodeError as e:
            self.promo_error = str(e)
            self.promo_message = None
            return False
        self.promo_error = None
        self.promo_message = promo.description
        return True

    def remove_promo_code(self, code: str) -> QuoteState:
        self.promo_error = None
        self.promo_message = None
        return self._store.remove_promo_code(code)

    # --- navigation ---

    def next(self) -> bool:
        if self.is_success:
            return False

        result = validate_step(self.current_step, self.state)
        if not result.ok:
            self.validation_error = result.error
            self._logger.info(
                "Step validation blocked", extra={"step": self.current_step.value, "reason": result.error}
            )
            return False
        self.validation_error = None

        # A service sub-flow entered from ANALYSIS returns there once vehicle and contact are done.
        if self.current_step in SERVICE_END_STEPS and self._lead_details_complete():
            analysis_index = self._steps.index(WizardStep.ANALYSIS)
            if analysis_index > self._index:
                self._set_index(analysis_index)
                return True

        if self._index < len(self._steps) - 1:
            self._set_index(self._index + 1)
            return True
        return False

    def back(self) -> bool:
        self.validation_error = None
        if self.is_success or self._index == 0:
            return False
        self._set_index(self._index - 1)
        return True

    def jump_to_service(self, service: ServiceType, start_step: WizardStep | None = None) -> WizardStep:
        previous = self.current_step
        if not self.state.has_service(service):
            # The rebuilt graph is entered once, at the target, not at the old index.
            self._suspend_step_hook = True
            try:
                self._store.merge({"services": self.state.services + (service,)})
            finally:
                self._suspend_step_hook = False

        target = start_step or first_step_for(service, self.state)
        if target in self._steps:
            self._index = self._steps.index(target)
        if self.current_step is not previous:
            self._on_step_changed()
        if target not in self._steps:
            raise InvalidStepError(f"{target.value} is not part of the current wizard")
        self._logger.info("Jumped to service", extra={"service": service.value, "step": target.value})
        return target

    def start_over(self, confirmed: bool) -> bool:
        """Discard the whole quote. Irreversible, so the caller must pass explicit confirmation."""
        if not confirmed:
            return False
        self._store.reset()
        self._index = 0
        self._cancel_timers()
        self.validation_error = None
        self.promo_error = None
        self.promo_message = None
        self.submission_error = None
        self.opportunities = []
        self.is_analyzing = False
        self.is_success = False
        self._logger.info("Quote started over")
        return True

    def close(self) -> None:
        self._cancel_timers()
        self.is_analyzing = False

    # --- analysis opportunities ---

    def select_free_addon(self, zone: str) -> QuoteState:
        offer = next((o for o in self.opportunities if o.kind is OpportunityKind.FREE_ADDON), None)
        if offer is None:
            raise ValueError("No free add-on offer is available.")
        state = self._store.merge(free_addon_update(self.state, offer, zone))
        self.promo_error = None
        self.promo_message = "Free Add-on Applied!"
        self._logger.info("Free add-on claimed", extra={"code": offer.code, "reason": zone})
        return state

    def select_upsell(self, index: int) -> WizardStep:
        if index < 0 or index >= len(self.opportunities):
            raise ValueError(f"No opportunity at position {index}")
        offer = self.opportunities[index]
        if offer.kind is not OpportunityKind.UPSELL or offer.service_to_enable is None:
            raise ValueError("Only upsell opportunities add a service.")

        if offer.code not in self.state.promo_codes:
            try:
                self._store.add_promo_code(offer.code)
            except PromoCodeError as e:
                self._logger.warning("Upsell code not applied", extra={"code": offer.code, "reason": str(e)})
        return self.jump_to_service(offer.service_to_enable)

    # --- submission ---

    async def submit(self) -> bool:
        if self.is_submitting:
            raise SubmissionInProgressError("A submission is already in progress.")
        if self.is_success or self.current_step is not WizardStep.REVIEW:
            raise InvalidStepError("Quotes can only be submitted from the review step.")

        self.is_submitting = True
        self.submission_error = None
        try:
            await self._submit_lead.execute(self.state)
        except LeadSubmissionError as e:
            self.submission_error = SUBMISSION_FAILED_MESSAGE
            self._logger.warning("Lead submission failed", extra={"reason": str(e)})
            return False
        finally:
            self.is_submitting = False

        self._store.reset()
        self._index = 0
        self._cancel_timers()
        self.is_analyzing = False
        self.opportunities = []
        self.promo_message = None
        self.is_success = True
        return True

    def snapshot(self) -> WizardSnapshot:
        return WizardSnapshot(
            phase=self.phase,
            step=self.current_step,
            step_index=self._index,
            steps=tuple(self._steps),
            state=self.state,
            validation_error=self.validation_error,
            promo_error=self.promo_error,
            promo_message=self.promo_message,
            opportunities=tuple(self.opportunities),
            submission_error=self.submission_error,
            is_submitting=self.is_submitting,
        )

    # --- internals ---

    def _lead_details_complete(self) -> bool:
        return self.state.vehicle.is_complete() and self.state.contact.is_complete()

    def _on_state_changed(self, state: QuoteState) -> None:
        # Any interaction acknowledges the last validation error.
        self.validation_error = None
        previous = self.current_step
        self._steps = build_steps(state)
        self._index = min(self._index, len(self._steps) - 1)
        if self.current_step is not previous and not self._suspend_step_hook:
            self._on_step_changed()

    def _set_index(self, index: int) -> None:
        previous = self.current_step
        self._index = index
        if self.current_step is not previous:
            self._on_step_changed()

    def _on_step_changed(self) -> None:
        self._cancel_timers()
        self.is_analyzing = False
        step = self.current_step
        self._logger.info("Step entered", extra={"step": step.value})
        if step is WizardStep.ANALYSIS:
            self.opportunities = []
            self.is_analyzing = True
            self._analysis_task = self._scheduler.call_later(self._analysis_delay, self._run_analysis)

    def _run_analysis(self) -> None:
        self._analysis_task = None
        if self.current_step is not WizardStep.ANALYSIS:
            return
        self.opportunities = analyze_promos(self.state, self._new_vehicle_year)
        self.is_analyzing = False
        self._logger.info(
            "Promo analysis complete",
            extra={"opportunities": ",".join(o.code for o in self.opportunities) or "none"},
        )
        if not self.opportunities:
            self._advance_task = self._scheduler.call_later(self._auto_advance_delay, self._auto_advance)

    def _auto_advance(self) -> None:
        self._advance_task = None
        if self.current_step is WizardStep.ANALYSIS and not self.opportunities:
            self.next()

    def _cancel_timers(self) -> None:
        for task in (self._analysis_task, self._advance_task):
            if task is not None:
                task.cancel()
        self._analysis_task = None
        self._advance_task = None
