from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace
from typing import Any, Callable

import pytest

from app.application.exceptions import LeadSubmissionError
from app.application.ports.lead_submission import LeadSubmissionPort
from app.application.ports.scheduler import ScheduledTask, SchedulerPort
from app.application.use_cases.quote_store import QuoteStore
from app.application.use_cases.quote_wizard import QuoteWizard
from app.application.use_cases.submit_lead import SubmitLeadUseCase
from app.domain.entities.quote_state import ContactInfo, QuoteState, VehicleInfo
from app.domain.entities.wizard_step import WizardStep
from app.infrastructure.knowledge.promo_registry_store import PromoRegistryStore
from app.infrastructure.store.memory_session_storage import MemorySessionStorage
from app.infrastructure.webhook.mock_lead_submission import MockLeadSubmission


class ManualTask(ScheduledTask):
    def __init__(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        self.delay_seconds = delay_seconds
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(SchedulerPort):
    """Collects timers; tests fire them explicitly with run_pending()."""

    def __init__(self) -> None:
        self.tasks: list[ManualTask] = []

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        task = ManualTask(delay_seconds, callback)
        self.tasks.append(task)
        return task

    @property
    def pending(self) -> list[ManualTask]:
        return [t for t in self.tasks if not t.cancelled and not t.fired]

    def run_pending(self) -> int:
        """Fire the timers pending right now. Timers they schedule wait for the next call."""
        due = self.pending
        for task in due:
            task.fired = True
            task.callback()
        return len(due)


class FailingSubmission(LeadSubmissionPort):
    def __init__(self) -> None:
        self.attempts = 0

    async def submit(self, payload: dict[str, Any]) -> None:
        self.attempts += 1
        raise LeadSubmissionError("webhook returned status 500")


class BlockingSubmission(LeadSubmissionPort):
    """Holds every submission open until release is set. Create inside a running loop."""

    def __init__(self) -> None:
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.submitted: list[dict[str, Any]] = []

    async def submit(self, payload: dict[str, Any]) -> None:
        self.started.set()
        await self.release.wait()
        self.submitted.append(payload)


@dataclass
class WizardHarness:
    wizard: QuoteWizard
    store: QuoteStore
    storage: MemorySessionStorage
    scheduler: ManualScheduler
    submission: LeadSubmissionPort


def lead_ready_state(**changes: Any) -> QuoteState:
    """A state whose vehicle and contact steps already pass."""
    state = QuoteState(
        vehicle=VehicleInfo(year="2020", make="BMW", model="M3", color="Alpine White"),
        contact=ContactInfo(first_name="Sam", last_name="Lee", phone="604-555-0100", email="sam@example.com"),
    )
    return replace(state, **changes)


def drive_to_review(harness: WizardHarness) -> None:
    wizard = harness.wizard
    for _ in range(30):
        step = wizard.current_step
        if step is WizardStep.REVIEW:
            return
        if step is WizardStep.ANALYSIS and harness.scheduler.pending:
            harness.scheduler.run_pending()
            continue
        assert wizard.next(), f"blocked at {step.value}: {wizard.validation_error}"
    raise AssertionError("review step not reached")


@pytest.fixture
def make_harness() -> Callable[..., WizardHarness]:
    def _make(
        state: QuoteState | None = None,
        submission: LeadSubmissionPort | None = None,
        new_vehicle_year: int = 2024,
    ) -> WizardHarness:
        storage = MemorySessionStorage(initial=state)
        store = QuoteStore(storage=storage, promo_registry=PromoRegistryStore())
        scheduler = ManualScheduler()
        submission = submission or MockLeadSubmission()
        wizard = QuoteWizard(
            store=store,
            scheduler=scheduler,
            submit_lead=SubmitLeadUseCase(
                submission=submission,
                source="https://example.test/",
                form_type="Smart Quote Widget",
            ),
            analysis_delay_seconds=3.0,
            auto_advance_delay_seconds=1.0,
            new_vehicle_year=new_vehicle_year,
        )
        return WizardHarness(wizard, store, storage, scheduler, submission)

    return _make
