"""Clinical assessment paragraph.

Session-wide statistics (modal assist level, dominant deficit, dominant
activity) feed a decision table keyed on progress trend and the modal assist
level's dependence bucket.
"""
from __future__ import annotations

from typing import Hashable, Iterable, Optional, Sequence

from pydantic import BaseModel

from rehab_narrative.lexicon.vocabulary import Lexicon
from rehab_narrative.models.session import ProgressTrend, TreatmentUnit
from rehab_narrative.narrative.phrasing import (
    DEFICIT_FALLBACK,
    capitalize_first,
    clean_activity_label,
)

HIGH_DEPENDENCE = frozenset({"Dep", "Max A", "Mod A"})
MODERATE_DEPENDENCE = frozenset({"Min A", "CGA", "SBA"})
INDEPENDENT = frozenset({"Mod I", "Indep"})

ASSIST_UNKNOWN = "N/A"
ACTIVITY_FALLBACK = "functional tasks"


class SessionStatistics(BaseModel):
    """Aggregates across every unit of the session."""

    modal_assist: str = ASSIST_UNKNOWN
    dominant_deficit: str = DEFICIT_FALLBACK
    dominant_activity: str = ACTIVITY_FALLBACK


def most_common(values: Iterable[Hashable]) -> Optional[Hashable]:
    """Most frequent value; ties go to the first value to reach the top count."""
    counts: dict[Hashable, int] = {}
    best = None
    best_count = 0
    for value in values:
        counts[value] = counts.get(value, 0) + 1
        if counts[value] > best_count:
            best, best_count = value, counts[value]
    return best


def session_statistics(units: Sequence[TreatmentUnit], lexicon: Lexicon) -> SessionStatistics:
    """Modal assist level, dominant deficit phrase and dominant activity."""
    stats = SessionStatistics()

    modal_assist = most_common(u.assist_level for u in units if u.assist_level.strip())
    if modal_assist is not None:
        stats.modal_assist = modal_assist

    top_deficit = most_common(d for u in units for d in u.deficits)
    if top_deficit is not None:
        stats.dominant_deficit = lexicon.phrase(top_deficit)

    top_activity = most_common(u.activity_label for u in units)
    if top_activity is not None:
        stats.dominant_activity = clean_activity_label(top_activity)

    return stats


def render_assessment(progress: ProgressTrend, stats: SessionStatistics) -> str:
    """Select and fill the assessment template for this trend and assist level."""
    assist = stats.modal_assist
    deficit = stats.dominant_deficit
    activity = stats.dominant_activity

    if progress == ProgressTrend.DECLINED:
        return (
            f"Assessment: Patient demonstrated a decline in {activity} performance versus "
            f"baseline, primarily exacerbated by {deficit}. Session required pivot to safety "
            f"instruction and compensatory strategies, with patient requiring {assist} to "
            f"maintain safety."
        )

    if progress == ProgressTrend.MAINTAINED:
        if assist in HIGH_DEPENDENCE:
            return (
                f"Assessment: Functional status maintained during {activity}. Patient "
                f"continues to require {assist} secondary to {deficit}, necessitating skilled "
                f"intervention to prevent complications and ensure positioning."
            )
        if assist in MODERATE_DEPENDENCE:
            return (
                f"Assessment: Patient maintained baseline during {activity}. {capitalize_first(deficit)} "
                f"remains the primary limiting factor, requiring skilled cues to ensure "
                f"carryover of techniques and prevent regression."
            )
        return (
            f"Assessment: Patient maintained baseline functional status in {activity}. Focus "
            f"remains on consistency and building endurance to mitigate {deficit}."
        )

    if assist in MODERATE_DEPENDENCE:
        return (
            f"Assessment: Patient displayed improved functional tolerance during {activity}. "
            f"Reduced impact of {deficit} allowed for greater independence, though {assist} "
            f"remains indicated to ensure safety."
        )
    if assist in INDEPENDENT:
        return (
            f"Assessment: Patient improved from baseline in {activity}, demonstrating increased "
            f"efficiency. Focus remains on refining mechanics and generalizing skills to novel "
            f"environments to fully address {deficit}."
        )
    return (
        f"Assessment: Patient improved participation in {activity}. While {assist} is still "
        f"required, patient demonstrated improved motor planning and effort, specifically "
        f"regarding {deficit}."
    )
