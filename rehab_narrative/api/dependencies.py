"""FastAPI dependencies for lexicon and archive access."""

from functools import lru_cache

from fastapi import HTTPException

from rehab_narrative.config import get_lexicon, get_settings
from rehab_narrative.errors import LexiconError
from rehab_narrative.lexicon import Lexicon
from rehab_narrative.session import SessionArchive


def get_lexicon_dependency() -> Lexicon:
    """Configured lexicon; a broken override file is a server error."""
    try:
        return get_lexicon()
    except LexiconError as e:
        raise HTTPException(status_code=500, detail=str(e))


@lru_cache
def get_archive() -> SessionArchive:
    """Process-wide archive backed by the configured file."""
    return SessionArchive(get_settings().archive_path)
