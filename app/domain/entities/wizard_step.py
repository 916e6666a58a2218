from __future__ import annotations

from enum import Enum


class WizardStep(str, Enum):
    SERVICES = "SERVICES"
    PPF_TYPE = "PPF_TYPE"
    PPF_COLOR = "PPF_COLOR"
    PPF_PACKAGE = "PPF_PACKAGE"
    PPF_ADDONS = "PPF_ADDONS"
    TINT_TYPE = "TINT_TYPE"
    TINT_PACKAGE = "TINT_PACKAGE"
    TINT_ADDONS = "TINT_ADDONS"
    CERAMIC_PACKAGE = "CERAMIC_PACKAGE"
    CERAMIC_ADDONS = "CERAMIC_ADDONS"
    PAINT_CORRECTION = "PAINT_CORRECTION"
    INTERIOR = "INTERIOR"
    WINDSHIELD = "WINDSHIELD"
    UNDERCOATING = "UNDERCOATING"
    DETAILING = "DETAILING"
    VEHICLE = "VEHICLE"
    CONTACT = "CONTACT"
    ANALYSIS = "ANALYSIS"
    REVIEW = "REVIEW"


class WizardPhase(str, Enum):
    ACTIVE = "active"
    ANALYZING = "analyzing"
    REVIEWING = "reviewing"
    SUBMITTING = "submitting"
    SUCCESS = "success"
