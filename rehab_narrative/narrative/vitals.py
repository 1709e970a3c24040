"""Opening vitals sentence and closing tolerance sentence."""

import re
from typing import Optional

from rehab_narrative.models.session import SessionVitals

# Leading integer, the way a lenient parser reads "7", " 7/10" or "6.5"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

HIGH_PAIN_THRESHOLD = 3


def _present(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def render_vitals(vitals: SessionVitals) -> str:
    """Baseline vitals sentence, or "" when nothing was recorded."""
    fields = [
        ("BP", vitals.blood_pressure, ""),
        ("HR", vitals.heart_rate, ""),
        ("RR", vitals.resp_rate, ""),
        ("O2", vitals.oxygen_sat, "%"),
    ]
    parts = [
        f"{label} {value}{suffix}"
        for label, raw, suffix in fields
        if (value := _present(raw)) is not None
    ]
    if not parts:
        return ""
    return f"Baseline vitals: {', '.join(parts)}."


def parse_pain(value: Optional[str]) -> Optional[int]:
    """Pain score as an integer, or None when missing or non-numeric."""
    value = _present(value)
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1))


def render_tolerance(vitals: SessionVitals) -> str:
    """Closing sentence on session tolerance and pain."""
    pain = parse_pain(vitals.pain)
    if pain is None:
        return "Patient tolerated session well."
    if pain > HIGH_PAIN_THRESHOLD:
        return (
            "Patient tolerated session with fair endurance; "
            f"pain reported at {pain}/10 requiring frequent rest breaks."
        )
    return f"Patient tolerated session well with pain controlled at {pain}/10."
