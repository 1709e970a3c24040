"""Billing-code paragraphs built from merged treatment units.

Units are partitioned by billing code (first-seen order), then merged by
(phase, assist level, deficits, params). Each merged group becomes one
sentence. Sentence structure, verbs, connectors and descriptors cycle by the
group's position within its code so a long note does not read as a template.
"""
from __future__ import annotations

import logging
from typing import Mapping, Sequence

from rehab_narrative.lexicon.vocabulary import Lexicon
from rehab_narrative.models.session import GroupedUnit, TreatmentUnit
from rehab_narrative.narrative.phrasing import (
    capitalize_first,
    clean_activity_label,
    join_natural,
    render_cues,
)

logger = logging.getLogger(__name__)

ASSIST_FALLBACK = "unspecified assistance"

# Cue attachment styles
COMMA = "comma"
SEPARATE = "separate"
NECESSITATING = "necessitating"

# (core clause, cue attachment), selected by group index mod 6
SENTENCE_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("Patient {patient_verb} {tasks} with {assist} {cause} {qualified}", COMMA),
    ("{therapist_verb} {tasks} {goal} {deficit}; patient demonstrated {assist} performance", SEPARATE),
    ("{qualified} {effect} {assist} during {tasks}", SEPARATE),
    ("{tasks} completed with {assist} {cause} {qualified}", NECESSITATING),
    ("Intervention targeted {deficit} via {tasks}, where patient required {assist}", COMMA),
    ("Patient executed {tasks} with {assist}, as {qualified} limited independence", SEPARATE),
)


def group_by_code(units: Sequence[TreatmentUnit]) -> dict[str, list[TreatmentUnit]]:
    """Partition units by billing code, preserving first-seen code order."""
    groups: dict[str, list[TreatmentUnit]] = {}
    for unit in units:
        groups.setdefault(unit.billing_code, []).append(unit)
    return groups


def group_key(unit: TreatmentUnit) -> tuple[str, str, str, str]:
    return (unit.phase, unit.assist_level, "|".join(unit.deficits), unit.params or "")


def merge_units(units: Sequence[TreatmentUnit]) -> list[GroupedUnit]:
    """Merge units sharing a group key; tasks, cues and deficits are de-duplicated."""
    merged: dict[tuple[str, str, str, str], GroupedUnit] = {}
    for unit in units:
        key = group_key(unit)
        if key not in merged:
            merged[key] = GroupedUnit(phase=unit.phase, assist_level=unit.assist_level)
        merged[key].absorb(unit)
    return list(merged.values())


def attach_cues(core: str, cue_text: str, style: str) -> str:
    """Close the core clause, appending cues in the given style."""
    if not cue_text:
        return f"{core}."
    if style == COMMA:
        return f"{core}, requiring {cue_text}."
    if style == NECESSITATING:
        return f"{core}, necessitating {cue_text}."
    return f"{core}. Required {cue_text}."


def _cycle(words: Sequence[str], index: int) -> str:
    return words[index % len(words)]


def render_sentence(group: GroupedUnit, index: int, lexicon: Lexicon) -> str:
    """Render one merged group as a sentence, varied by its index."""
    vocab = lexicon.vocabulary
    deficit = join_natural([lexicon.phrase(d) for d in group.deficits])
    descriptor = _cycle(vocab.descriptors, index)
    qualified = f"{descriptor} {deficit}" if index % 2 == 0 else deficit

    template, style = SENTENCE_TEMPLATES[index % len(SENTENCE_TEMPLATES)]
    core = template.format(
        tasks=", ".join(group.tasks),
        assist=group.assist_level.strip() or ASSIST_FALLBACK,
        deficit=deficit,
        qualified=qualified,
        cause=_cycle(vocab.cause_connectors, index),
        effect=_cycle(vocab.effect_connectors, index),
        goal=_cycle(vocab.goal_connectors, index),
        patient_verb=_cycle(vocab.patient_verbs, index),
        therapist_verb=_cycle(vocab.therapist_verbs, index),
    )
    return attach_cues(capitalize_first(core), render_cues(group.cues), style)


def paragraph_header(code: str, activity_label: str, minutes: str | None) -> str:
    """Code and clean label, e.g. "97535 Self-Care (15 mins)"; minutes optional."""
    header = f"{code} {clean_activity_label(activity_label)}"
    if minutes and minutes.strip():
        header += f" ({minutes.strip()} mins)"
    return header


def render_paragraphs(
    units: Sequence[TreatmentUnit],
    minutes_by_code: Mapping[str, str],
    lexicon: Lexicon,
) -> list[str]:
    """One paragraph per billing code, each opening with a blank line."""
    paragraphs = []
    for code, code_units in group_by_code(units).items():
        groups = merge_units(code_units)
        logger.debug(f"Code {code}: {len(code_units)} units merged into {len(groups)} groups")

        sentences = [render_sentence(group, i, lexicon) for i, group in enumerate(groups)]
        header = paragraph_header(code, code_units[0].activity_label, minutes_by_code.get(code))
        paragraphs.append(f"\n\n{header}: {' '.join(sentences)}")
    return paragraphs
