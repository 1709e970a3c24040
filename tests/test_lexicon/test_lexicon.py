"""Tests for the packaged lexicon and lexicon override files."""

import json

import pytest

from rehab_narrative.errors import LexiconError
from rehab_narrative.lexicon import (
    NARRATIVE_VOCABULARY,
    SKILLED_PHRASES,
    default_lexicon,
    load_lexicon,
)


class TestDefaultLexicon:
    def test_known_deficit_maps_to_phrase(self, lexicon):
        assert lexicon.phrase("safety awareness") == "inconsistent safety awareness regarding fall risks"

    def test_unknown_deficit_passes_through(self, lexicon):
        assert lexicon.phrase("fear of falling") == "fear of falling"

    def test_uses_packaged_tables(self, lexicon):
        assert lexicon.deficit_phrases == SKILLED_PHRASES
        assert lexicon.vocabulary == NARRATIVE_VOCABULARY

    def test_cached(self):
        assert default_lexicon() is default_lexicon()

    def test_vocabulary_lists_non_empty(self, lexicon):
        vocab = lexicon.vocabulary
        assert len(vocab.patient_verbs) == 7
        assert len(vocab.therapist_verbs) == 6
        assert len(vocab.cause_connectors) == 5
        assert len(vocab.effect_connectors) == 4
        assert len(vocab.goal_connectors) == 6
        assert len(vocab.descriptors) == 5


class TestLoadLexicon:
    def test_phrases_merged_over_defaults(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps({"deficit_phrases": {"fear of falling": "documented fear of falling"}}))

        lexicon = load_lexicon(path)
        assert lexicon.phrase("fear of falling") == "documented fear of falling"
        assert lexicon.phrase("safety awareness") == SKILLED_PHRASES["safety awareness"]

    def test_vocabulary_list_replaced(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps({"vocabulary": {"descriptors": ["marked"]}}))

        lexicon = load_lexicon(path)
        assert lexicon.vocabulary.descriptors == ("marked",)
        assert lexicon.vocabulary.patient_verbs == NARRATIVE_VOCABULARY.patient_verbs

    def test_missing_file(self, tmp_path):
        with pytest.raises(LexiconError, match="Cannot read"):
            load_lexicon(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_text("{not json")
        with pytest.raises(LexiconError, match="Invalid JSON"):
            load_lexicon(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_text("[]")
        with pytest.raises(LexiconError, match="JSON object"):
            load_lexicon(path)

    @pytest.mark.parametrize(
        "payload",
        [{"deficit_phrases": ["x"]}, {"vocabulary": "abc"}],
    )
    def test_section_not_an_object(self, tmp_path, payload):
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps(payload))
        with pytest.raises(LexiconError, match="must be a JSON object"):
            load_lexicon(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(LexiconError, match="Cannot read"):
            load_lexicon(path)

    def test_empty_word_list_rejected(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps({"vocabulary": {"patient_verbs": []}}))
        with pytest.raises(LexiconError, match="Invalid lexicon"):
            load_lexicon(path)
