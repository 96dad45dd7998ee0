from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import Optional

from morph_adapter import __version__

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "morph-adapter"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    # --- Morphology Service ---
    # Path to an adapter config JSON ({"engine": {...}, "url": "..."}).
    # When unset, the bundled default config is used.
    MORPH_CONFIG_PATH: Optional[str] = None

    @property
    def HTTP_USER_AGENT(self) -> str:
        return f"{self.APP_NAME}/{__version__}"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
