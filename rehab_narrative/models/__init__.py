"""Data models for treatment sessions."""

from rehab_narrative.models.session import (
    ASSIST_LEVELS,
    AssistLevel,
    GroupedUnit,
    ProgressTrend,
    SessionVitals,
    TreatmentUnit,
)

__all__ = [
    "ASSIST_LEVELS",
    "AssistLevel",
    "GroupedUnit",
    "ProgressTrend",
    "SessionVitals",
    "TreatmentUnit",
]
