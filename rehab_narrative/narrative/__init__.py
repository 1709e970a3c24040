"""Narrative generation engine."""

from rehab_narrative.narrative.composer import NO_DATA_MESSAGE, compose

__all__ = ["NO_DATA_MESSAGE", "compose"]
