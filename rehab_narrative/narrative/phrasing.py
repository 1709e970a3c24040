"""Small text helpers shared by the narrative stages."""

import re
from typing import Iterable, Sequence

DEFICIT_FALLBACK = "functional deficits"

# "<main> (<focus1>, <focus2>, ...)" as produced by the cue builder
_CUE_PATTERN = re.compile(r"^(?P<main>.+?) \((?P<focus>[^()]*)\)\s*$")


def join_natural(items: Sequence[str], empty: str = DEFICIT_FALLBACK) -> str:
    """Join items as an English list with an Oxford comma for 3+ items."""
    if not items:
        return empty
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def clean_activity_label(label: str) -> str:
    """Drop the parenthetical code suffix: "Self-Care (97535)" -> "Self-Care"."""
    return label.split(" (")[0].strip()


def capitalize_first(text: str) -> str:
    """Upper-case the first character only, leaving acronyms intact."""
    return text[:1].upper() + text[1:]


def render_cue(cue: str) -> str:
    """Render one cue string as narrative text.

    "Min Verbal (Safety, Balance)" -> "Min Verbal cues for safety and balance".
    Anything that does not match the encoded form is treated as a bare label.
    """
    match = _CUE_PATTERN.match(cue)
    if not match:
        return f"{cue.strip()} cues"

    main = match.group("main").strip()
    focuses = [f.strip().lower() for f in match.group("focus").split(",") if f.strip()]
    if not focuses:
        return f"{main} cues"
    return f"{main} cues for {join_natural(focuses)}"


def render_cues(cues: Iterable[str]) -> str:
    """Render all cues of a group, separated by semicolons."""
    return "; ".join(render_cue(c) for c in cues if c.strip())
