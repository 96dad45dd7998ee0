# morph_adapter\adapters\tufts\config.py
import json
import structlog
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = structlog.get_logger()

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.json"

ConfigSource = Union["AdapterConfig", Mapping[str, Any], str, Path, None]


class AdapterConfig(BaseModel):
    """
    Adapter configuration.

    `engine` maps a language code to engine ids in preference order; only the
    first is used. `url` is a template containing the r_WORD, r_ENGINE and
    r_LANG placeholders.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    engine: Dict[str, List[str]]
    url: str
    allow_unknown_values: bool = Field(default=True, alias="allowUnknownValues")

    @field_validator("url")
    @classmethod
    def _url_has_word(cls, v: str) -> str:
        if "r_WORD" not in v:
            raise ValueError("URL template must contain the r_WORD placeholder.")
        return v

    def engine_for(self, lang_code: str) -> Optional[str]:
        engines = self.engine.get(lang_code) or []
        return engines[0] if engines else None


def _read_raw(source: Union[Mapping[str, Any], str, Path]) -> Dict[str, Any]:
    if isinstance(source, Mapping):
        return dict(source)

    if isinstance(source, str) and source.lstrip().startswith("{"):
        raw = json.loads(source)
    else:
        with open(Path(source), "r", encoding="utf-8") as f:
            raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError("Adapter config must be a JSON object.")
    return raw


def _read_default_raw() -> Optional[Dict[str, Any]]:
    try:
        return _read_raw(DEFAULT_CONFIG_PATH)
    except (OSError, ValueError) as e:
        logger.error("adapter_config_default_unavailable", path=str(DEFAULT_CONFIG_PATH), error=str(e))
        return None


def load_default_config() -> Optional[AdapterConfig]:
    raw = _read_default_raw()
    if raw is None:
        return None
    try:
        return AdapterConfig.model_validate(raw)
    except ValidationError as e:
        logger.error("adapter_config_default_invalid", errors=e.error_count())
        return None


def load_adapter_config(source: ConfigSource = None) -> Optional[AdapterConfig]:
    """
    Resolves the adapter configuration.

    Accepts a ready AdapterConfig, a mapping, a JSON string or a path to a
    JSON file. Keys the source leaves out are taken from the bundled default
    config, so {"allowUnknownValues": false} is a complete source. A missing
    or invalid source falls back to the default config; if that is unusable
    too, the adapter is left unconfigured (None).
    """
    if isinstance(source, AdapterConfig):
        return source

    if source is None:
        return load_default_config()

    try:
        raw = _read_raw(source)
    except (OSError, ValueError) as e:
        # JSONDecodeError is a ValueError
        logger.warning("adapter_config_unreadable", error=str(e), fallback="default")
        return load_default_config()

    merged = dict(_read_default_raw() or {})
    merged.update(raw)
    try:
        config = AdapterConfig.model_validate(merged)
    except ValidationError as e:
        logger.warning("adapter_config_invalid", errors=e.error_count(), fallback="default")
        return load_default_config()

    logger.debug("adapter_config_loaded", languages=sorted(config.engine))
    return config
