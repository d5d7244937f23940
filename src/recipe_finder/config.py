import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://www.themealdb.com/api/json/v1/1/"


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from environment variables."""

    api_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 10.0
    favorites_key: str = "favorites"
    default_query: str = "chicken"
    default_mode: str = "ingredient"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Build settings from the environment, after loading `.env` if present.

        Variables already set in the environment win over the file.
        """
        load_dotenv(env_file)
        base_url = os.getenv("MEALDB_BASE_URL", DEFAULT_BASE_URL)
        if not base_url.endswith("/"):
            base_url += "/"
        return cls(
            api_base_url=base_url,
            request_timeout=_float_env("MEALDB_TIMEOUT", cls.request_timeout),
            favorites_key=os.getenv("FAVORITES_STORAGE_KEY", cls.favorites_key),
            default_query=os.getenv("DEFAULT_QUERY", cls.default_query),
            default_mode=os.getenv("DEFAULT_SEARCH_MODE", cls.default_mode),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
