"""Narrative composer: treatment units and session metadata to note text."""

import logging
from typing import Mapping, Optional, Sequence, Union

from rehab_narrative.lexicon.vocabulary import Lexicon, default_lexicon
from rehab_narrative.models.session import ProgressTrend, SessionVitals, TreatmentUnit
from rehab_narrative.narrative.assessment import render_assessment, session_statistics
from rehab_narrative.narrative.grouping import render_paragraphs
from rehab_narrative.narrative.vitals import render_tolerance, render_vitals

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data entered."


def compose(
    units: Sequence[TreatmentUnit],
    vitals: Optional[SessionVitals] = None,
    minutes_by_code: Optional[Mapping[str, str]] = None,
    progress: Union[ProgressTrend, str] = ProgressTrend.MAINTAINED,
    lexicon: Optional[Lexicon] = None,
) -> str:
    """Compose the full narrative note for a session.

    Sections, in order: baseline vitals, one paragraph per billing code (in
    first-seen order), clinical assessment, tolerance. Empty sections are
    dropped. Inputs are never mutated, and identical inputs always produce
    identical text.

    Args:
        units: Recorded treatment units, in the order they were entered.
        vitals: Session vitals; missing fields are left out of the note.
        minutes_by_code: Free-text minutes per billing code.
        progress: Progress trend versus baseline.
        lexicon: Deficit phrases and vocabulary (defaults to the packaged tables).

    Returns:
        Note text, or NO_DATA_MESSAGE when there are no units.
    """
    if not units:
        return NO_DATA_MESSAGE

    vitals = vitals or SessionVitals()
    minutes_by_code = minutes_by_code or {}
    progress = ProgressTrend(progress)
    lexicon = lexicon or default_lexicon()

    logger.debug(f"Composing note from {len(units)} units (progress={progress.value})")

    sections = [
        render_vitals(vitals),
        *render_paragraphs(units, minutes_by_code, lexicon),
        render_assessment(progress, session_statistics(units, lexicon)),
        render_tolerance(vitals),
    ]
    return " ".join(s for s in sections if s.strip())
