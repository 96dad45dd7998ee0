# morph_adapter\adapters\tufts\adapter.py
import structlog
from typing import Any, Dict, Optional
from urllib.parse import quote

from morph_adapter.adapters.base_adapter import BaseAdapter
from morph_adapter.adapters.tufts.config import AdapterConfig, ConfigSource, load_adapter_config
from morph_adapter.adapters.tufts.engines import ENGINES
from morph_adapter.adapters.tufts.import_data import ImportData
from morph_adapter.adapters.tufts.test_data import WordTestData
from morph_adapter.adapters.tufts.transform import TuftsTransformer
from morph_adapter.core.domain.models import Homonym

logger = structlog.get_logger()


class TuftsAdapter(BaseAdapter):
    """
    Client for the Tufts morphology service (morph.alpheios.net).

    The config picks one analysis engine per language; the engine's mapping
    table converts the service vocabulary into canonical features.
    """

    def __init__(self, config: ConfigSource = None, user_agent: Optional[str] = None):
        super().__init__(user_agent=user_agent)
        self.config: Optional[AdapterConfig] = load_adapter_config(config)
        if self.config is None:
            logger.error("tufts_adapter_unconfigured")
        self.engine_map: Dict[str, ImportData] = dict(ENGINES)
        self.test_data = WordTestData()

    @property
    def allow_unknown_values(self) -> bool:
        return self.config.allow_unknown_values if self.config else False

    def get_engine_language_map(self, lang_code: str) -> Optional[ImportData]:
        """Mapping table of the first engine configured for a language."""
        if self.config is None:
            return None
        engine_id = self.config.engine_for(lang_code)
        if engine_id is None:
            return None
        data = self.engine_map.get(engine_id)
        if data is None:
            logger.warning("tufts_engine_unknown", lang=lang_code, engine=engine_id)
        return data

    def prepare_request_url(self, lang_code: str, word: str) -> Optional[str]:
        data = self.get_engine_language_map(lang_code)
        if data is None:
            return None
        return (
            self.config.url
            .replace("r_WORD", quote(word, safe=""))
            .replace("r_ENGINE", data.engine)
            .replace("r_LANG", lang_code)
        )

    async def fetch_test_data(self, lang_code: str, word: str) -> Dict[str, Any]:
        """Recorded response for a word; WordNotInTestDataError if there is none."""
        return self.test_data.get(word)

    def transform(self, json_obj: Dict[str, Any], target_word: Optional[str] = None) -> Optional[Homonym]:
        transformer = TuftsTransformer(self.get_engine_language_map, self.allow_unknown_values)
        return transformer.transform(json_obj, target_word)
