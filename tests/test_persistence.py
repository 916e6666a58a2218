"""
Tests for durable quote session persistence.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from app.application.use_cases.quote_store import QuoteStore
from app.application.utils.state_codec import quote_state_from_dict, quote_state_to_dict
from app.domain.entities.quote_state import ContactInfo, PPFConfig, QuoteState, TintConfig, VehicleInfo
from app.domain.entities.services import (
    ContactMethod,
    InteriorProtectionOption,
    PaintCorrectionLevel,
    PPFFilmType,
    PPFPackage,
    ServiceType,
    TintPackage,
    TintType,
)
from app.infrastructure.knowledge.promo_registry_store import PromoRegistryStore
from app.infrastructure.store.json_session_storage import JsonSessionStorage


def _full_state() -> QuoteState:
    return QuoteState(
        services=(ServiceType.PPF, ServiceType.TINT, ServiceType.PAINT_CORRECTION, ServiceType.INTERIOR),
        ppf=PPFConfig(
            film_type=PPFFilmType.FASHION,
            package=PPFPackage.DIAMOND,
            fashion_color="Satin Abyss Blue",
            is_fusion=True,
        ),
        tint=TintConfig(type=TintType.XR, package=TintPackage.FIVE, add_ons=("Sunstrip (Visor Strip)",)),
        paint_correction=PaintCorrectionLevel.STAGE_2,
        interior=(InteriorProtectionOption.LEATHER, InteriorProtectionOption.TRIM),
        vehicle=VehicleInfo(year="2024", make="Porsche", model="Taycan", size="Sedan", color="Black"),
        contact=ContactInfo(first_name="Ana", last_name="Ruiz", phone="604", email="ana@example.com", method=ContactMethod.EMAIL),
        promo_codes=("TINTBUNDLE10",),
        notes="Pick up Friday",
    )


def test_json_storage_persists_and_restores_state():
    """A saved quote comes back unchanged from a fresh storage instance."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "session.json"
        JsonSessionStorage(path=str(path)).save(_full_state())

        restored = JsonSessionStorage(path=str(path)).load()
        assert restored == _full_state()


def test_snapshot_uses_camel_case_keys_and_tags():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "session.json"
        JsonSessionStorage(path=str(path)).save(_full_state())

        data = json.loads(path.read_text(encoding="utf-8"))
        state = data["state"]
        assert data["version"] == 1
        assert state["ppf"]["filmType"] == "fashion"
        assert state["ppf"]["fashionColor"] == "Satin Abyss Blue"
        assert state["paintCorrection"] == "stage_2"
        assert state["contact"]["method"] == "Email"
        assert state["promoCodes"] == ["TINTBUNDLE10"]


def test_missing_or_corrupt_file_counts_as_no_snapshot():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "session.json"
        storage = JsonSessionStorage(path=str(path))
        assert storage.load() is None

        path.write_text("{not json", encoding="utf-8")
        assert storage.load() is None

        path.write_text("[1, 2]", encoding="utf-8")
        assert storage.load() is None


def test_clear_removes_snapshot():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "session.json"
        storage = JsonSessionStorage(path=str(path))
        storage.save(_full_state())
        storage.clear()
        assert not path.exists()
        assert storage.load() is None
        storage.clear()


def test_store_resumes_where_it_left_off():
    """Progress survives a restart: a new store over the same file sees the old state."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = str(Path(tmpdir) / "session.json")
        first = QuoteStore(storage=JsonSessionStorage(path=path), promo_registry=PromoRegistryStore())
        first.merge({"services": (ServiceType.CERAMIC,)})
        first.add_promo_code("fallshield25")

        second = QuoteStore(storage=JsonSessionStorage(path=path), promo_registry=PromoRegistryStore())
        assert second.get().services == (ServiceType.CERAMIC,)
        assert second.get().promo_codes == ("FALLSHIELD25",)


def test_unknown_tags_and_keys_are_dropped():
    state = quote_state_from_dict(
        {
            "services": ["ppf", "spaceship", "ppf"],
            "ppf": {"filmType": "chrome", "package": "gold"},
            "promoCodes": ["tintbundle10", "TINTBUNDLE10"],
            "legacyField": True,
        }
    )
    assert state.services == (ServiceType.PPF,)
    assert state.ppf.film_type is None
    assert state.ppf.package is PPFPackage.GOLD
    assert state.promo_codes == ("TINTBUNDLE10",)


def test_default_state_serialises_empty_values():
    data = quote_state_to_dict(QuoteState())
    assert data["services"] == []
    assert data["ppf"]["package"] is None
    assert data["contact"]["method"] == "Text"
    assert quote_state_from_dict(data) == QuoteState()
