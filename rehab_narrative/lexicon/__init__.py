"""Static reference data: taxonomy, deficit phrases, narrative vocabulary."""

from rehab_narrative.lexicon.skilled_phrases import SKILLED_PHRASES
from rehab_narrative.lexicon.taxonomy import (
    CLINICAL_ACTIVITIES,
    HIDDEN_ACTIVITY_IDS,
    PARAMS_BILLING_CODES,
    ClinicalActivity,
    Phase,
    Subtask,
    get_activity,
    visible_activities,
)
from rehab_narrative.lexicon.vocabulary import (
    CUE_CONTEXT,
    CUE_FOCUS_OPTIONS,
    CUE_LEVELS,
    CUE_TYPES,
    NARRATIVE_VOCABULARY,
    Lexicon,
    NarrativeVocabulary,
    default_lexicon,
    load_lexicon,
)

__all__ = [
    "CLINICAL_ACTIVITIES",
    "CUE_CONTEXT",
    "CUE_FOCUS_OPTIONS",
    "CUE_LEVELS",
    "CUE_TYPES",
    "ClinicalActivity",
    "HIDDEN_ACTIVITY_IDS",
    "Lexicon",
    "NARRATIVE_VOCABULARY",
    "NarrativeVocabulary",
    "PARAMS_BILLING_CODES",
    "Phase",
    "SKILLED_PHRASES",
    "Subtask",
    "default_lexicon",
    "get_activity",
    "load_lexicon",
    "visible_activities",
]
