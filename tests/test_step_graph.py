from __future__ import annotations

from app.application.use_cases.step_graph import build_steps, first_step_for
from app.domain.entities.quote_state import PPFConfig, QuoteState
from app.domain.entities.services import PPFFilmType, ServiceType
from app.domain.entities.wizard_step import WizardStep as S


def test_no_services_gives_only_fixed_steps():
    assert build_steps(QuoteState()) == [S.SERVICES, S.VEHICLE, S.CONTACT, S.ANALYSIS, S.REVIEW]


def test_fashion_film_inserts_color_step():
    fashion = QuoteState(services=(ServiceType.PPF,), ppf=PPFConfig(film_type=PPFFilmType.FASHION))
    steps = build_steps(fashion)
    assert steps[1:5] == [S.PPF_TYPE, S.PPF_COLOR, S.PPF_PACKAGE, S.PPF_ADDONS]

    clear = QuoteState(services=(ServiceType.PPF,), ppf=PPFConfig(film_type=PPFFilmType.CLEAR))
    assert S.PPF_COLOR not in build_steps(clear)


def test_services_follow_canonical_order_not_selection_order():
    state = QuoteState(services=(ServiceType.DETAILING, ServiceType.CERAMIC, ServiceType.PPF, ServiceType.TINT))
    assert build_steps(state) == [
        S.SERVICES,
        S.PPF_TYPE, S.PPF_PACKAGE, S.PPF_ADDONS,
        S.TINT_TYPE, S.TINT_PACKAGE, S.TINT_ADDONS,
        S.CERAMIC_PACKAGE, S.CERAMIC_ADDONS,
        S.DETAILING,
        S.VEHICLE, S.CONTACT, S.ANALYSIS, S.REVIEW,
    ]


def test_every_service_contributes_its_block():
    state = QuoteState(services=tuple(ServiceType))
    steps = build_steps(state)
    assert len(steps) == len(set(steps))
    for step in (S.PAINT_CORRECTION, S.INTERIOR, S.WINDSHIELD, S.UNDERCOATING, S.DETAILING):
        assert step in steps
    assert steps[-4:] == [S.VEHICLE, S.CONTACT, S.ANALYSIS, S.REVIEW]


def test_adding_a_service_keeps_existing_blocks():
    before = build_steps(QuoteState(services=(ServiceType.PPF, ServiceType.INTERIOR)))
    after = build_steps(QuoteState(services=(ServiceType.PPF, ServiceType.INTERIOR, ServiceType.CERAMIC)))
    assert [s for s in after if s not in (S.CERAMIC_PACKAGE, S.CERAMIC_ADDONS)] == before
    assert after.index(S.CERAMIC_PACKAGE) < after.index(S.INTERIOR)


def test_build_steps_is_deterministic():
    state = QuoteState(services=(ServiceType.TINT, ServiceType.PPF), ppf=PPFConfig(film_type=PPFFilmType.FASHION))
    assert build_steps(state) == build_steps(state)


def test_first_step_for_service():
    state = QuoteState()
    assert first_step_for(ServiceType.PPF, state) is S.PPF_TYPE
    assert first_step_for(ServiceType.CERAMIC, state) is S.CERAMIC_PACKAGE
    assert first_step_for(ServiceType.WINDSHIELD, state) is S.WINDSHIELD
