import logging

from app.core.config import settings
from app.application.ports.lead_submission import LeadSubmissionPort
from app.application.ports.promo_registry import PromoRegistryPort
from app.application.ports.session_storage import SessionStoragePort
from app.application.ports.vehicle_catalog import VehicleCatalogPort
from app.application.use_cases.quote_store import QuoteStore
from app.application.use_cases.quote_wizard import QuoteWizard
from app.application.use_cases.submit_lead import SubmitLeadUseCase
from app.infrastructure.knowledge.promo_registry_store import PromoRegistryStore
from app.infrastructure.knowledge.vehicle_catalog_store import VehicleCatalogStore
from app.infrastructure.scheduling.asyncio_scheduler import AsyncioScheduler
from app.infrastructure.store.json_session_storage import JsonSessionStorage
from app.infrastructure.store.memory_session_storage import MemorySessionStorage
from app.infrastructure.webhook.lead_webhook_client import LeadWebhookClient
from app.infrastructure.webhook.mock_lead_submission import MockLeadSubmission


# One wizard per process: the quote belongs to a single customer session.
_wizard: QuoteWizard | None = None
_submission: LeadSubmissionPort | None = None


def get_session_storage() -> SessionStoragePort:
    if settings.SESSION_STORAGE.lower() == "memory":
        return MemorySessionStorage()
    return JsonSessionStorage(path=settings.SESSION_STORAGE_PATH)


def get_lead_submission() -> LeadSubmissionPort:
    logger = logging.getLogger(__name__)
    if not settings.LEAD_WEBHOOK_URL or settings.ENV.lower() in {"dev", "local"}:
        logger.info("Using MockLeadSubmission (webhook missing or ENV=dev/local)")
        return MockLeadSubmission()
    logger.info("Using LeadWebhookClient")
    return LeadWebhookClient(
        endpoint=settings.LEAD_WEBHOOK_URL,
        timeout=settings.LEAD_TIMEOUT_SECONDS,
    )


def get_promo_registry() -> PromoRegistryPort:
    return PromoRegistryStore()


def get_vehicle_catalog() -> VehicleCatalogPort:
    return VehicleCatalogStore()


def get_quote_wizard() -> QuoteWizard:
    global _wizard, _submission
    if _wizard is None:
        _submission = get_lead_submission()
        store = QuoteStore(storage=get_session_storage(), promo_registry=get_promo_registry())
        _wizard = QuoteWizard(
            store=store,
            scheduler=AsyncioScheduler(),
            submit_lead=SubmitLeadUseCase(
                submission=_submission,
                source=settings.LEAD_SOURCE,
                form_type=settings.LEAD_FORM_TYPE,
            ),
            analysis_delay_seconds=settings.ANALYSIS_DELAY_SECONDS,
            auto_advance_delay_seconds=settings.AUTO_ADVANCE_DELAY_SECONDS,
            new_vehicle_year=settings.NEW_VEHICLE_YEAR,
        )
    return _wizard


async def close_quote_wizard() -> None:
    global _wizard, _submission
    if _wizard is not None:
        _wizard.close()
        _wizard = None
    if isinstance(_submission, LeadWebhookClient):
        await _submission.aclose()
    _submission = None
