"""End-to-end tests for the narrative composer."""

import pytest

from rehab_narrative.models.session import ProgressTrend, SessionVitals
from rehab_narrative.narrative import NO_DATA_MESSAGE, compose
from tests.conftest import make_unit


@pytest.fixture
def mixed_session(self_care_unit):
    return [
        self_care_unit,
        make_unit(params="2x10"),
        make_unit(task="Concentric/Eccentric reps", params="2x10"),
        make_unit(
            activity_label="Self-Care (97535)",
            billing_code="97535",
            phase="Dressing (Donning)",
            task="Pulling to hips",
            assist_level="CGA",
            deficits=("core stability",),
        ),
    ]


class TestEmptySession:
    def test_no_units_returns_fixed_message(self, full_vitals):
        assert compose([], full_vitals, {"97110": "15"}, ProgressTrend.DECLINED) == NO_DATA_MESSAGE

    def test_message_text(self):
        assert compose([]) == "No data entered."


class TestMergedSentence:
    def test_two_tasks_merge_into_one_sentence(self):
        units = [
            make_unit(params="2x10"),
            make_unit(task="Concentric/Eccentric reps", params="2x10"),
        ]
        note = compose(units, SessionVitals(), {"97110": "15"}, ProgressTrend.MAINTAINED)
        assert note == (
            "\n\n97110 Therapeutic Exercise (15 mins): Patient engaged in Isometric holds (2x10), "
            "Concentric/Eccentric reps (2x10) with Min A secondary to significant protective "
            "muscle guarding limiting active motion. "
            "Assessment: Patient maintained baseline during Therapeutic Exercise. Protective "
            "muscle guarding limiting active motion remains the primary limiting factor, "
            "requiring skilled cues to ensure carryover of techniques and prevent regression. "
            "Patient tolerated session well."
        )

    def test_merged_cues_rendered_once(self):
        cue = "Min Verbal (Safety, Balance)"
        units = [make_unit(cues=(cue,)), make_unit(task="Concentric/Eccentric reps", cues=(cue,))]
        note = compose(units)
        assert note.count("Min Verbal cues for safety and balance") == 1


class TestSectionOrder:
    def test_full_note_layout(self, mixed_session, full_vitals):
        note = compose(
            mixed_session,
            full_vitals,
            {"97535": "23", "97110": "15"},
            ProgressTrend.IMPROVED,
        )
        assert note.startswith("Baseline vitals: BP 128/76, HR 72, RR 16, O2 97%. \n\n97535 Self-Care (23 mins): ")
        assert note.index("\n\n97535 ") < note.index("\n\n97110 ") < note.index("Assessment: ")
        assert note.endswith("Patient tolerated session well with pain controlled at 2/10.")

    def test_one_paragraph_per_code(self, mixed_session):
        note = compose(mixed_session)
        assert note.count("\n\n97535 ") == 1
        assert note.count("\n\n97110 ") == 1

    def test_second_group_in_code_uses_next_template(self, mixed_session):
        note = compose(mixed_session)
        assert "Guided Pulling to hips to optimize insufficient core stability to maintain midline; " \
               "patient demonstrated CGA performance." in note

    def test_minutes_omitted_when_missing(self, mixed_session):
        note = compose(mixed_session, minutes_by_code={"97110": "15"})
        assert "\n\n97535 Self-Care: " in note
        assert "\n\n97110 Therapeutic Exercise (15 mins): " in note

    def test_without_vitals_note_starts_with_paragraph(self, mixed_session):
        assert compose(mixed_session).startswith("\n\n97535 Self-Care: ")

    def test_high_pain_tolerance(self, mixed_session):
        note = compose(mixed_session, SessionVitals(pain="7"))
        assert "fair endurance; pain reported at 7/10" in note


class TestAssessmentSelection:
    def test_declined_regardless_of_assist(self, mixed_session):
        note = compose(mixed_session, progress=ProgressTrend.DECLINED)
        # Both activities appear twice; Therapeutic Exercise reaches 2 first
        assert "Assessment: Patient demonstrated a decline in Therapeutic Exercise performance" in note

    def test_maintained_high_dependence(self):
        units = [make_unit(assist_level="Max A")]
        note = compose(units, progress=ProgressTrend.MAINTAINED)
        assert "Patient continues to require Max A secondary to" in note

    def test_progress_accepts_plain_string(self):
        note = compose([make_unit(assist_level="Indep")], progress="Improved")
        assert "refining mechanics" in note

    def test_invalid_progress_rejected(self):
        with pytest.raises(ValueError):
            compose([make_unit()], progress="Worse")


class TestDeterminism:
    def test_identical_inputs_identical_output(self, mixed_session, full_vitals):
        minutes = {"97535": "23"}
        first = compose(mixed_session, full_vitals, minutes, ProgressTrend.MAINTAINED)
        second = compose(list(mixed_session), full_vitals, dict(minutes), ProgressTrend.MAINTAINED)
        assert first == second

    def test_inputs_not_mutated(self, mixed_session):
        units = list(mixed_session)
        minutes = {"97535": "23"}
        compose(units, minutes_by_code=minutes)
        assert units == mixed_session
        assert minutes == {"97535": "23"}

    def test_order_changes_output(self, mixed_session):
        assert compose(mixed_session) != compose(list(reversed(mixed_session)))
