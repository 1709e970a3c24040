"""Rehab Narrative - skilled treatment note composer for PT/OT sessions."""

__version__ = "0.1.0"

from rehab_narrative.narrative import compose

__all__ = ["__version__", "compose"]
