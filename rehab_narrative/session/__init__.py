"""Session workflow: unit selection, undo/redo, note drafts and archive."""

from rehab_narrative.session.archive import SavedSession, SessionArchive, session_preview
from rehab_narrative.session.builder import UnitDraft, build_cue
from rehab_narrative.session.history import SelectionHistory
from rehab_narrative.session.state import NoteSession

__all__ = [
    "NoteSession",
    "SavedSession",
    "SelectionHistory",
    "SessionArchive",
    "UnitDraft",
    "build_cue",
    "session_preview",
]
