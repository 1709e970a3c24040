"""Domain exceptions."""


class RehabNarrativeError(Exception):
    """Base exception for rehab narrative errors."""

    pass


class LexiconError(RehabNarrativeError):
    """Lexicon file could not be read or validated."""

    pass


class SelectionError(RehabNarrativeError):
    """Treatment unit selection is incomplete."""

    pass
