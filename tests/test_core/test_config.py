"""Tests for settings and lexicon selection."""

import json
from pathlib import Path

import pytest

from rehab_narrative.config import Settings, get_lexicon, get_settings
from rehab_narrative.errors import LexiconError
from rehab_narrative.lexicon import default_lexicon


@pytest.fixture
def clean_settings():
    get_settings.cache_clear()
    get_lexicon.cache_clear()
    yield
    get_settings.cache_clear()
    get_lexicon.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("REHAB_NARRATIVE_LEXICON_PATH", raising=False)
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.history_limit == 50
        assert settings.archive_path == Path("./data/sessions/archive.json")
        assert not settings.has_lexicon_override

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("REHAB_NARRATIVE_HISTORY_LIMIT", "5")
        monkeypatch.setenv("REHAB_NARRATIVE_LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)

        assert settings.history_limit == 5
        assert settings.log_level == "DEBUG"


class TestGetLexicon:
    def test_default(self, monkeypatch, clean_settings):
        monkeypatch.delenv("REHAB_NARRATIVE_LEXICON_PATH", raising=False)
        assert get_lexicon() is default_lexicon()

    def test_override_file(self, monkeypatch, tmp_path, clean_settings):
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps({"vocabulary": {"descriptors": ["marked"]}}))
        monkeypatch.setenv("REHAB_NARRATIVE_LEXICON_PATH", str(path))

        assert get_lexicon().vocabulary.descriptors == ("marked",)

    def test_missing_override_file(self, monkeypatch, tmp_path, clean_settings):
        monkeypatch.setenv("REHAB_NARRATIVE_LEXICON_PATH", str(tmp_path / "missing.json"))

        with pytest.raises(LexiconError):
            get_lexicon()

    def test_override_read_once(self, monkeypatch, tmp_path, clean_settings):
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps({"deficit_phrases": {"fear of falling": "documented fear of falling"}}))
        monkeypatch.setenv("REHAB_NARRATIVE_LEXICON_PATH", str(path))

        first = get_lexicon()
        path.unlink()
        assert get_lexicon() is first
