"""Note session: everything the composer needs, plus the current draft."""

from typing import Optional

from pydantic import BaseModel, Field

from rehab_narrative.lexicon.vocabulary import Lexicon
from rehab_narrative.models.session import ProgressTrend, SessionVitals, TreatmentUnit
from rehab_narrative.narrative import compose


class NoteSession(BaseModel):
    """One treatment session being documented."""

    units: list[TreatmentUnit] = Field(default_factory=list)
    vitals: SessionVitals = Field(default_factory=SessionVitals)
    minutes_by_code: dict[str, str] = Field(default_factory=dict)
    progress: ProgressTrend = ProgressTrend.MAINTAINED
    note_text: str = ""

    def billing_codes(self) -> list[str]:
        """Distinct billing codes in first-seen order, for minutes entry."""
        return list(dict.fromkeys(u.billing_code for u in self.units))

    def generate(self, lexicon: Optional[Lexicon] = None) -> str:
        """Regenerate the draft note, replacing any manual edits."""
        self.note_text = compose(
            self.units,
            self.vitals,
            self.minutes_by_code,
            self.progress,
            lexicon,
        )
        return self.note_text
