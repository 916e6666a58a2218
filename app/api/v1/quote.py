from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.schemas import (
    FilmTypeRequestSchema,
    FreeAddonRequestSchema,
    JumpRequestSchema,
    OpportunitySchema,
    PromoCodeRequestSchema,
    QuotePatchSchema,
    StartOverRequestSchema,
    WizardViewSchema,
)
from app.application.exceptions import SubmissionInProgressError
from app.application.use_cases.quote_wizard import QuoteWizard
from app.application.utils.state_codec import partial_from_dict, quote_state_to_dict
from app.wiring.dependencies import get_quote_wizard


# Handlers are async so scheduled analysis timers run on the server event loop.
router = APIRouter(prefix="/api/v1/quote")
logger = logging.getLogger(__name__)


def _view(wizard: QuoteWizard) -> WizardViewSchema:
    snap = wizard.snapshot()
    return WizardViewSchema(
        phase=snap.phase,
        step=snap.step,
        step_index=snap.step_index,
        steps=list(snap.steps),
        state=quote_state_to_dict(snap.state),
        validation_error=snap.validation_error,
        promo_error=snap.promo_error,
        promo_message=snap.promo_message,
        opportunities=[
            OpportunitySchema(
                kind=o.kind,
                title=o.title,
                description=o.description,
                reason=o.reason,
                code=o.code,
                eligible_addons=list(o.eligible_addons) if o.eligible_addons is not None else None,
                service_to_enable=o.service_to_enable,
            )
            for o in snap.opportunities
        ],
        submission_error=snap.submission_error,
        is_submitting=snap.is_submitting,
    )


@router.get("", response_model=WizardViewSchema)
async def get_quote(wizard: QuoteWizard = Depends(get_quote_wizard)):
    return _view(wizard)


@router.patch("", response_model=WizardViewSchema)
async def update_quote(req: QuotePatchSchema, wizard: QuoteWizard = Depends(get_quote_wizard)):
    partial = partial_from_dict(req.model_dump(mode="json", by_alias=True, exclude_unset=True))
    if partial:
        try:
            wizard.update(partial)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    return _view(wizard)


@router.post("/next", response_model=WizardViewSchema)
async def next_step(wizard: QuoteWizard = Depends(get_quote_wizard)):
    wizard.next()
    return _view(wizard)


@router.post("/back", response_model=WizardViewSchema)
async def previous_step(wizard: QuoteWizard = Depends(get_quote_wizard)):
    wizard.back()
    return _view(wizard)


@router.post("/jump", response_model=WizardViewSchema)
async def jump_to_service(req: JumpRequestSchema, wizard: QuoteWizard = Depends(get_quote_wizard)):
    try:
        wizard.jump_to_service(req.service, req.start_step)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _view(wizard)


@router.post("/start-over", response_model=WizardViewSchema)
async def start_over(req: StartOverRequestSchema, wizard: QuoteWizard = Depends(get_quote_wizard)):
    if not wizard.start_over(confirmed=req.confirm):
        raise HTTPException(status_code=400, detail="Starting over requires confirmation.")
    return _view(wizard)


@router.post("/film-type", response_model=WizardViewSchema)
async def set_film_type(req: FilmTypeRequestSchema, wizard: QuoteWizard = Depends(get_quote_wizard)):
    wizard.set_film_type(req.film_type)
    return _view(wizard)


@router.post("/promo-codes", response_model=WizardViewSchema)
async def add_promo_code(req: PromoCodeRequestSchema, wizard: QuoteWizard = Depends(get_quote_wizard)):
    # Rejections are reported inline through promoError, not as HTTP errors.
    wizard.apply_promo_code(req.code)
    return _view(wizard)


@router.delete("/promo-codes/{code}", response_model=WizardViewSchema)
async def remove_promo_code(code: str, wizard: QuoteWizard = Depends(get_quote_wizard)):
    wizard.remove_promo_code(code)
    return _view(wizard)


@router.post("/opportunities/free-addon", response_model=WizardViewSchema)
async def claim_free_addon(req: FreeAddonRequestSchema, wizard: QuoteWizard = Depends(get_quote_wizard)):
    try:
        wizard.select_free_addon(req.zone)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _view(wizard)


@router.post("/opportunities/{index}/select", response_model=WizardViewSchema)
async def select_upsell(index: int, wizard: QuoteWizard = Depends(get_quote_wizard)):
    try:
        wizard.select_upsell(index)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _view(wizard)


@router.post("/submit", response_model=WizardViewSchema)
async def submit_quote(wizard: QuoteWizard = Depends(get_quote_wizard)):
    try:
        submitted = await wizard.submit()
    except SubmissionInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not submitted:
        logger.warning("Quote submission failed", extra={"reason": wizard.submission_error})
        raise HTTPException(status_code=502, detail=wizard.submission_error)
    return _view(wizard)
