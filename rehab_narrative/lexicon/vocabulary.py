"""Narrative vocabulary and the Lexicon handed to the composer."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rehab_narrative.errors import LexiconError
from rehab_narrative.lexicon.skilled_phrases import SKILLED_PHRASES

logger = logging.getLogger(__name__)


class NarrativeVocabulary(BaseModel):
    """Ordered word lists, cycled by group index when building sentences."""

    model_config = ConfigDict(frozen=True)

    patient_verbs: tuple[str, ...] = Field(..., min_length=1)
    therapist_verbs: tuple[str, ...] = Field(..., min_length=1)
    cause_connectors: tuple[str, ...] = Field(..., min_length=1)
    effect_connectors: tuple[str, ...] = Field(..., min_length=1)
    goal_connectors: tuple[str, ...] = Field(..., min_length=1)
    descriptors: tuple[str, ...] = Field(..., min_length=1)


class Lexicon(BaseModel):
    """Read-only lookup tables consumed by the composer."""

    model_config = ConfigDict(frozen=True)

    deficit_phrases: dict[str, str] = Field(default_factory=dict)
    vocabulary: NarrativeVocabulary

    def phrase(self, deficit: str) -> str:
        """Full clinical phrase for a deficit key; unknown keys pass through."""
        return self.deficit_phrases.get(deficit, deficit)


NARRATIVE_VOCABULARY = NarrativeVocabulary(
    patient_verbs=(
        "engaged in",
        "navigated",
        "executed",
        "completed",
        "participated in",
        "demonstrated",
        "performed",
    ),
    therapist_verbs=(
        "facilitated",
        "guided",
        "instructed",
        "corrected",
        "modulated",
        "intervened with",
    ),
    cause_connectors=(
        "secondary to",
        "stemming from",
        "exacerbated by",
        "related to",
        "in the context of",
    ),
    effect_connectors=(
        "necessitating",
        "warranting",
        "requiring",
        "indicating need for",
    ),
    goal_connectors=(
        "to ameliorate",
        "to optimize",
        "to restore",
        "to enhance",
        "to mitigate",
        "to remediate",
    ),
    descriptors=(
        "significant",
        "persistent",
        "notable",
        "variable",
        "demonstrable",
    ),
)

# ── Cue builder options ──────────────────────────────────────────────────────

CUE_LEVELS: tuple[str, ...] = ("Min", "Mod", "Max", "Tactile")
CUE_TYPES: tuple[str, ...] = ("Verbal", "Visual", "Tactile", "Demo")
CUE_FOCUS_OPTIONS: tuple[str, ...] = (
    "Safety",
    "Sequencing",
    "Technique",
    "Balance",
    "Insight",
    "Attention",
    "Initiation",
    "Motor Planning",
    "Problem Solving",
    "Quality of Mvmt",
)

# Rationale behind each cue type
CUE_CONTEXT: dict[str, str] = {
    "Verbal": "auditory commands to sequence tasks and improve safety awareness",
    "Tactile": "manual facilitation to correct postural alignment and muscle activation",
    "Visual": "visual markers to enhance orientation and attention",
    "Demonstration": "modeling to facilitate motor learning and praxic skills",
    "Proprioceptive": "approximation and input to modulate sensory processing",
}


@lru_cache
def default_lexicon() -> Lexicon:
    """Lexicon built from the packaged tables."""
    return Lexicon(deficit_phrases=dict(SKILLED_PHRASES), vocabulary=NARRATIVE_VOCABULARY)


def _section(data: dict, key: str, path: Path) -> dict:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise LexiconError(f"\"{key}\" in lexicon file {path} must be a JSON object")
    return section


def load_lexicon(path: Path) -> Lexicon:
    """Load a lexicon override file.

    The file is a JSON object with optional ``deficit_phrases`` (merged over
    the packaged phrases) and ``vocabulary`` (individual lists replace the
    packaged ones).

    Raises:
        LexiconError: If the file cannot be read or does not validate.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise LexiconError(f"Cannot read lexicon file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise LexiconError(f"Invalid JSON in lexicon file {path}: {e}") from e

    if not isinstance(data, dict):
        raise LexiconError(f"Lexicon file {path} must contain a JSON object")

    base = default_lexicon()
    merged: dict[str, Any] = {
        "deficit_phrases": {**base.deficit_phrases, **_section(data, "deficit_phrases", path)},
        "vocabulary": {**base.vocabulary.model_dump(), **_section(data, "vocabulary", path)},
    }

    try:
        lexicon = Lexicon.model_validate(merged)
    except ValidationError as e:
        raise LexiconError(f"Invalid lexicon file {path}: {e}") from e

    logger.info(
        f"Loaded lexicon from {path} "
        f"({len(lexicon.deficit_phrases)} deficit phrases)"
    )
    return lexicon
