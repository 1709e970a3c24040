"""Selection matrix: builds a TreatmentUnit from picker input.

The picker walks activity -> phase -> subtask, then the therapist fills the
matrix (assist level, deficits, optional params, cues) and confirms.
"""
from __future__ import annotations

import logging
from typing import Sequence

from pydantic import BaseModel, Field

from rehab_narrative.errors import SelectionError
from rehab_narrative.lexicon.taxonomy import (
    PARAMS_BILLING_CODES,
    ClinicalActivity,
    Phase,
    Subtask,
)
from rehab_narrative.models.session import AssistLevel, TreatmentUnit

logger = logging.getLogger(__name__)


def build_cue(level: str, cue_type: str, focuses: Sequence[str] = ()) -> str:
    """Encode a cue, e.g. build_cue("Min", "Verbal", ["Safety"]) -> "Min Verbal (Safety)"."""
    base = f"{level} {cue_type}".strip()
    if not focuses:
        return base
    return f"{base} ({', '.join(focuses)})"


class UnitDraft(BaseModel):
    """Matrix input for the subtask currently being recorded."""

    assist_level: str = ""
    deficits: list[str] = Field(default_factory=list)
    custom_deficit: str = ""
    params: str = ""
    cues: list[str] = Field(default_factory=list)

    def toggle_deficit(self, deficit: str) -> None:
        if deficit in self.deficits:
            self.deficits.remove(deficit)
        else:
            self.deficits.append(deficit)

    def add_cue(self, level: str, cue_type: str, focuses: Sequence[str] = ()) -> str:
        """Add an encoded cue unless an identical one is already present."""
        cue = build_cue(level, cue_type, focuses)
        if cue not in self.cues:
            self.cues.append(cue)
        return cue

    def remove_cue(self, cue: str) -> None:
        self.cues = [c for c in self.cues if c != cue]

    def final_deficits(self) -> list[str]:
        """Selected deficits followed by the custom entry, if any."""
        deficits = list(self.deficits)
        custom = self.custom_deficit.strip()
        if custom:
            deficits.append(custom)
        return deficits

    def audit_warnings(self) -> list[str]:
        """Documentation issues an auditor would flag for this draft."""
        warnings = []
        if self.assist_level == AssistLevel.MOD_I.value and self.cues:
            warnings.append("Mod I = No Cues")
        return warnings

    def confirm(
        self,
        activity: ClinicalActivity,
        phase: Phase,
        subtask: Subtask,
    ) -> TreatmentUnit:
        """Build the treatment unit for this draft.

        Raises:
            SelectionError: If no assist level or no deficit was selected.
        """
        if not self.assist_level.strip():
            raise SelectionError(f"Select an assist level for {subtask.name}")

        deficits = self.final_deficits()
        if not deficits:
            raise SelectionError(f"Select at least one deficit for {subtask.name}")

        params = None
        if activity.billing_code in PARAMS_BILLING_CODES and self.params.strip():
            params = self.params.strip()

        for warning in self.audit_warnings():
            logger.warning(f"Audit warning for {subtask.name}: {warning}")

        return TreatmentUnit(
            activity_label=activity.label,
            billing_code=activity.billing_code,
            phase=phase.name,
            task=subtask.name,
            assist_level=self.assist_level,
            cues=tuple(self.cues),
            deficits=tuple(deficits),
            params=params,
        )
