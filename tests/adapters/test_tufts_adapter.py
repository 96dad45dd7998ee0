# tests\adapters\test_tufts_adapter.py
import json
import pytest

from morph_adapter.adapters.tufts.adapter import TuftsAdapter
from morph_adapter.adapters.tufts.config import AdapterConfig, load_adapter_config
from morph_adapter.core.domain.exceptions import WordNotInTestDataError

DEFAULT_URL = "http://morph.alpheios.net/api/v1/analysis/word?word=r_WORD&engine=r_ENGINE&lang=r_LANG"

class TestAdapterConfig:
    def test_default_config(self):
        config = load_adapter_config()
        assert config.engine == {
            "lat": ["whitakerLat"],
            "grc": ["morpheusgrc"],
            "ara": ["aramorph"],
            "per": ["hazm"],
        }
        assert config.url == DEFAULT_URL
        assert config.allow_unknown_values is True

    def test_partial_mapping_is_merged_with_default(self):
        config = load_adapter_config({"allowUnknownValues": False})
        assert config.allow_unknown_values is False
        assert config.engine_for("lat") == "whitakerLat"

    def test_json_string_source(self):
        config = load_adapter_config(json.dumps({"engine": {"lat": ["whitakerLat"]}, "url": "http://x/?w=r_WORD"}))
        assert config.engine == {"lat": ["whitakerLat"]}
        assert config.url == "http://x/?w=r_WORD"

    def test_path_source(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"engine": {"grc": ["morpheusgrc"]}}), encoding="utf-8")
        config = load_adapter_config(str(path))
        assert config.engine == {"grc": ["morpheusgrc"]}
        assert config.url == DEFAULT_URL

    def test_missing_file_falls_back_to_default(self, tmp_path):
        config = load_adapter_config(str(tmp_path / "nope.json"))
        assert config.engine_for("per") == "hazm"

    def test_invalid_config_falls_back_to_default(self):
        config = load_adapter_config({"url": "http://example.org/no-placeholder"})
        assert config.url == DEFAULT_URL

    def test_config_instance_is_used_as_is(self):
        config = AdapterConfig(engine={"lat": ["whitakerLat"]}, url="http://x/r_WORD")
        assert load_adapter_config(config) is config

    def test_unconfigured_when_default_is_unusable(self, monkeypatch, tmp_path):
        monkeypatch.setattr(
            "morph_adapter.adapters.tufts.config.DEFAULT_CONFIG_PATH", tmp_path / "missing.json"
        )
        assert load_adapter_config() is None
        adapter = TuftsAdapter()
        assert adapter.config is None
        assert adapter.get_engine_language_map("lat") is None
        assert adapter.prepare_request_url("lat", "mare") is None


class TestEngineSelection:
    @pytest.mark.parametrize("lang, engine", [
        ("lat", "whitakerLat"),
        ("grc", "morpheusgrc"),
        ("ara", "aramorph"),
        ("per", "hazm"),
    ])
    def test_engine_per_language(self, adapter, lang, engine):
        assert adapter.get_engine_language_map(lang).engine == engine

    def test_unconfigured_language(self, adapter):
        assert adapter.get_engine_language_map("eng") is None

    def test_only_first_engine_is_used(self):
        adapter = TuftsAdapter({"engine": {"lat": ["whitakerLat", "morpheuslat"]}})
        assert adapter.get_engine_language_map("lat").engine == "whitakerLat"

    def test_unknown_engine_id(self):
        adapter = TuftsAdapter({"engine": {"lat": ["morpheuslat"]}})
        assert adapter.get_engine_language_map("lat") is None


class TestPrepareRequestUrl:
    def test_latin_url(self, adapter):
        url = adapter.prepare_request_url("lat", "mare")
        assert url == "http://morph.alpheios.net/api/v1/analysis/word?word=mare&engine=whitakerLat&lang=lat"

    def test_greek_word_is_quoted(self, adapter):
        url = adapter.prepare_request_url("grc", "φιλόσοφος")
        assert "engine=morpheusgrc&lang=grc" in url
        assert "φ" not in url
        assert "word=%CF%86" in url

    def test_unconfigured_language(self, adapter):
        assert adapter.prepare_request_url("san", "rama") is None


@pytest.mark.asyncio
class TestFetchTestData:

    async def test_known_word(self, adapter):
        json_obj = await adapter.fetch_test_data("lat", "mare")
        assert json_obj["RDF"]["Annotation"]["creator"]["Agent"]["about"] == "org.perseus:tools:morpheus.v1"

    async def test_greek_word(self, adapter):
        homonym = adapter.transform(await adapter.fetch_test_data("grc", "φιλόσοφος"), "φιλόσοφος")
        assert homonym.language == "grc"
        assert homonym.lexemes[0].lemma.word == "φιλόσοφος"

    async def test_unknown_word(self, adapter):
        with pytest.raises(WordNotInTestDataError, match='Word "xyzzy" does not exist in test data'):
            await adapter.fetch_test_data("lat", "xyzzy")
