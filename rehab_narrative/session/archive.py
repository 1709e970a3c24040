"""Archive of generated notes, newest first, backed by a JSON file."""

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, TypeAdapter, ValidationError

from rehab_narrative.session.state import NoteSession

logger = logging.getLogger(__name__)

PREVIEW_TASKS = 3
UNNAMED_PREVIEW = "Unnamed Session"


class SavedSession(BaseModel):
    """An archived note."""

    id: str
    timestamp: str
    preview: str
    text: str


_saved_list = TypeAdapter(list[SavedSession])


def session_preview(session: NoteSession) -> str:
    """First few task names, with an ellipsis when more were recorded."""
    summary = ", ".join(u.task for u in session.units[:PREVIEW_TASKS])
    if len(session.units) > PREVIEW_TASKS:
        summary += "..."
    return summary or UNNAMED_PREVIEW


class SessionArchive:
    """Previously generated notes.

    When a path is given the archive is loaded from it on creation and
    rewritten after every change. Without a path it lives in memory only.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        self._sessions: list[SavedSession] = []
        if path is not None:
            self._sessions = self._load(path)

    @staticmethod
    def _load(path: Path) -> list[SavedSession]:
        if not path.exists():
            return []
        try:
            return _saved_list.validate_json(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable session archive {path}: {e}")
            return []

    def _persist(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(_saved_list.dump_python(self._sessions), f, indent=2)

    def save(self, session: NoteSession) -> Optional[SavedSession]:
        """Archive the session's note. Sessions without note text are skipped."""
        if not session.note_text.strip():
            return None

        saved = SavedSession(
            id=uuid.uuid4().hex[:12],
            timestamp=datetime.now(timezone.utc).isoformat(),
            preview=session_preview(session),
            text=session.note_text,
        )
        self._sessions.insert(0, saved)
        self._persist()
        logger.info(f"Archived session {saved.id}: {saved.preview}")
        return saved

    def all(self) -> list[SavedSession]:
        return list(self._sessions)

    def get(self, session_id: str) -> Optional[SavedSession]:
        return next((s for s in self._sessions if s.id == session_id), None)

    def clear(self) -> None:
        self._sessions = []
        self._persist()

    def __len__(self) -> int:
        return len(self._sessions)
