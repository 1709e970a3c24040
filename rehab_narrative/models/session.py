"""Treatment session data models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProgressTrend(str, Enum):
    """Clinician judgment of change from baseline."""

    IMPROVED = "Improved"
    MAINTAINED = "Maintained"
    DECLINED = "Declined"


class AssistLevel(str, Enum):
    """Assistance levels, most to least dependent."""

    DEP = "Dep"
    MAX_A = "Max A"
    MOD_A = "Mod A"
    MIN_A = "Min A"
    CGA = "CGA"
    SBA = "SBA"
    MOD_I = "Mod I"
    INDEP = "Indep"


ASSIST_LEVELS: tuple[str, ...] = tuple(level.value for level in AssistLevel)


class TreatmentUnit(BaseModel):
    """One recorded task performed at a given assistance level."""

    model_config = ConfigDict(frozen=True)

    activity_label: str = Field(..., description='e.g. "Self-Care (97535)"')
    billing_code: str = Field(..., description="CPT code driving paragraph grouping")
    phase: str
    task: str
    assist_level: str = ""
    cues: tuple[str, ...] = ()
    deficits: tuple[str, ...] = ()
    params: Optional[str] = None

    @property
    def task_display(self) -> str:
        """Task name with params suffix, if any."""
        if self.params:
            return f"{self.task} ({self.params})"
        return self.task


class SessionVitals(BaseModel):
    """Baseline vitals. Blank or missing fields are treated as not recorded."""

    model_config = ConfigDict(frozen=True)

    blood_pressure: Optional[str] = None
    heart_rate: Optional[str] = None
    resp_rate: Optional[str] = None
    oxygen_sat: Optional[str] = None
    pain: Optional[str] = Field(None, description="0-10 scale")


class GroupedUnit(BaseModel):
    """Units merged under one (phase, assist, deficits, params) key."""

    phase: str
    assist_level: str
    tasks: list[str] = Field(default_factory=list)
    cues: list[str] = Field(default_factory=list)
    deficits: list[str] = Field(default_factory=list)

    def absorb(self, unit: TreatmentUnit) -> None:
        """Merge a unit's tasks, cues and deficits, keeping first-seen order."""
        _extend_unique(self.tasks, [unit.task_display])
        _extend_unique(self.cues, unit.cues)
        _extend_unique(self.deficits, unit.deficits)


def _extend_unique(target: list[str], values) -> None:
    for value in values:
        if value not in target:
            target.append(value)
