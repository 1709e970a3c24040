"""Pytest configuration and fixtures."""

import pytest

from rehab_narrative.lexicon import default_lexicon
from rehab_narrative.models.session import SessionVitals, TreatmentUnit


def make_unit(**overrides) -> TreatmentUnit:
    """Therapeutic exercise unit with overridable fields."""
    fields = {
        "activity_label": "Therapeutic Exercise (97110)",
        "billing_code": "97110",
        "phase": "Strength & Activation",
        "task": "Isometric holds",
        "assist_level": "Min A",
        "cues": (),
        "deficits": ("muscle guarding",),
        "params": None,
    }
    fields.update(overrides)
    return TreatmentUnit(**fields)


@pytest.fixture
def lexicon():
    return default_lexicon()


@pytest.fixture
def unit_factory():
    return make_unit


@pytest.fixture
def self_care_unit():
    return make_unit(
        activity_label="Self-Care (97535)",
        billing_code="97535",
        phase="ADL Transfers",
        task="Toilet transfer",
        assist_level="Mod A",
        cues=("Min Verbal (Safety, Sequencing)",),
        deficits=("safety awareness", "motor planning"),
    )


@pytest.fixture
def full_vitals():
    return SessionVitals(
        blood_pressure="128/76",
        heart_rate="72",
        resp_rate="16",
        oxygen_sat="97",
        pain="2",
    )
