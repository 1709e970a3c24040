"""Tests for the vitals and tolerance sentences."""

import pytest

from rehab_narrative.models.session import SessionVitals
from rehab_narrative.narrative.vitals import parse_pain, render_tolerance, render_vitals


class TestRenderVitals:
    def test_all_fields(self, full_vitals):
        assert render_vitals(full_vitals) == "Baseline vitals: BP 128/76, HR 72, RR 16, O2 97%."

    def test_only_present_fields(self):
        vitals = SessionVitals(heart_rate="88", oxygen_sat="94")
        assert render_vitals(vitals) == "Baseline vitals: HR 88, O2 94%."

    def test_no_fields_is_empty(self):
        assert render_vitals(SessionVitals()) == ""

    def test_blank_fields_are_not_recorded(self):
        assert render_vitals(SessionVitals(blood_pressure="", heart_rate="  ")) == ""

    def test_pain_is_not_a_vital_sign(self):
        assert render_vitals(SessionVitals(pain="5")) == ""


class TestParsePain:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("7", 7),
            ("0", 0),
            (" 8/10", 8),
            ("6.5", 6),
            ("", None),
            (None, None),
            ("moderate", None),
            ("n/a", None),
        ],
    )
    def test_parse(self, value, expected):
        assert parse_pain(value) == expected


class TestRenderTolerance:
    def test_high_pain(self):
        result = render_tolerance(SessionVitals(pain="7"))
        assert "fair endurance" in result
        assert "7/10" in result
        assert "frequent rest breaks" in result

    def test_low_pain(self):
        result = render_tolerance(SessionVitals(pain="2"))
        assert result == "Patient tolerated session well with pain controlled at 2/10."

    def test_threshold_is_controlled(self):
        assert "pain controlled at 3/10" in render_tolerance(SessionVitals(pain="3"))

    def test_just_above_threshold(self):
        assert "fair endurance" in render_tolerance(SessionVitals(pain="4"))

    def test_not_recorded(self):
        assert render_tolerance(SessionVitals()) == "Patient tolerated session well."

    def test_blank_pain(self):
        assert render_tolerance(SessionVitals(pain="")) == "Patient tolerated session well."

    def test_non_numeric_pain_is_not_recorded(self):
        result = render_tolerance(SessionVitals(pain="severe"))
        assert result == "Patient tolerated session well."
        assert not any(ch.isdigit() for ch in result)
