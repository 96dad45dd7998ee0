# tests\adapters\test_whitaker_lemma.py
from morph_adapter.adapters.tufts.engines.whitaker import data, parse_whitaker_lemma

class TestWhitakerLemmaParser:
    def test_principal_parts(self):
        lemma = parse_whitaker_lemma("sumo, sumere, sumsi, sumtus", "lat")
        assert lemma.word == "sumo"
        assert lemma.principal_parts == ["sumo", "sumere", "sumsi", "sumtus"]

    def test_space_separated_stem_and_suffix(self):
        lemma = parse_whitaker_lemma("cap io", "lat")
        assert lemma.word == "cap"
        assert lemma.principal_parts == ["cap"]

    def test_single_word(self):
        lemma = parse_whitaker_lemma("mare", "lat")
        assert lemma.word == "mare"
        assert lemma.principal_parts == ["mare"]

    def test_empty_headword(self):
        assert parse_whitaker_lemma("", "lat") is None
        assert parse_whitaker_lemma(" , ", "lat") is None

    def test_empty_first_segment(self):
        """Only the first segment can supply the lemma word."""
        assert parse_whitaker_lemma(", sumere", "lat") is None
        assert parse_whitaker_lemma("  , sumere, sumsi", "lat") is None

    def test_empty_later_segment_is_dropped(self):
        lemma = parse_whitaker_lemma("sumo, , sumsi", "lat")
        assert lemma.word == "sumo"
        assert lemma.principal_parts == ["sumo", "sumsi"]

    def test_installed_on_latin_table(self):
        lemma = data.parse_lemma("capio, capere, cepi, captus")
        assert lemma.word == "capio"
        assert lemma.language == "lat"
        assert len(lemma.principal_parts) == 4
