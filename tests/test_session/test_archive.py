"""Tests for the session archive."""

import json

from rehab_narrative.session import NoteSession, SessionArchive, session_preview
from tests.conftest import make_unit


def _session(*tasks: str, note: str = "Note text") -> NoteSession:
    return NoteSession(units=[make_unit(task=t) for t in tasks], note_text=note)


class TestSessionPreview:
    def test_up_to_three_tasks(self):
        assert session_preview(_session("a", "b")) == "a, b"

    def test_ellipsis_beyond_three(self):
        assert session_preview(_session("a", "b", "c", "d")) == "a, b, c..."

    def test_no_units(self):
        assert session_preview(_session()) == "Unnamed Session"


class TestSessionArchive:
    def test_save_newest_first(self):
        archive = SessionArchive()
        first = archive.save(_session("a"))
        second = archive.save(_session("b"))

        assert [s.id for s in archive.all()] == [second.id, first.id]
        assert len(archive) == 2

    def test_skips_empty_note(self):
        archive = SessionArchive()
        assert archive.save(_session("a", note="   ")) is None
        assert len(archive) == 0

    def test_get(self):
        archive = SessionArchive()
        saved = archive.save(_session("a"))
        assert archive.get(saved.id) == saved
        assert archive.get("missing") is None

    def test_persists_to_file(self, tmp_path):
        path = tmp_path / "nested" / "archive.json"
        saved = SessionArchive(path).save(_session("a", note="Saved note"))

        reloaded = SessionArchive(path)
        assert reloaded.all() == [saved]
        assert json.loads(path.read_text())[0]["text"] == "Saved note"

    def test_clear(self, tmp_path):
        path = tmp_path / "archive.json"
        archive = SessionArchive(path)
        archive.save(_session("a"))
        archive.clear()

        assert archive.all() == []
        assert SessionArchive(path).all() == []

    def test_corrupt_file_ignored(self, tmp_path):
        path = tmp_path / "archive.json"
        path.write_text("{not json")
        assert SessionArchive(path).all() == []

    def test_undecodable_file_ignored(self, tmp_path):
        path = tmp_path / "archive.json"
        path.write_bytes(b"\xff\xfe[not json")

        archive = SessionArchive(path)
        assert archive.all() == []

        saved = archive.save(_session("a"))
        assert SessionArchive(path).all() == [saved]
