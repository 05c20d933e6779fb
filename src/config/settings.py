"""Application settings loaded from environment variables via pydantic-settings.

Two sources, in priority order:

  1. Environment variables, e.g. ``CACHE_NAMESPACE=orders.``
  2. A ``.env`` file in the working directory (local development)

Field names map to upper-cased environment variables
(``store_max_size`` -> ``STORE_MAX_SIZE``).  Defaults apply when neither
source sets a value.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """cache-bridge settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Cache ===
    # Prepended verbatim to every key.  Empty = un-namespaced, the only
    # configuration in which clear() is allowed to flush the store.
    cache_namespace: str = ""

    # === In-memory store ===
    store_max_size: int = 10000

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    @field_validator("store_max_size")
    @classmethod
    def _positive_size(cls, value: int) -> int:
        if value <= 0:
            msg = f"store_max_size must be positive, got {value}"
            raise ValueError(msg)
        return value

    @property
    def is_namespaced(self) -> bool:
        return self.cache_namespace != ""
