import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Honda Aid Admin API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Remote Honda Aid REST API
    api_base_url: str = "https://file-managment-javz.onrender.com"
    api_timeout: float = 30.0
    firebase_token: str = "STR"

    # Local key/value storage (bearer token, display preferences)
    local_storage_file: str = "data/local_storage.json"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore: outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_api: str = "INFO"              # Honda Aid API client

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Strip a trailing slash so endpoint paths can be joined verbatim."""
        if self.api_base_url.endswith("/"):
            self.api_base_url = self.api_base_url.rstrip("/")
            _config_logger.debug("Normalized api_base_url to %s", self.api_base_url)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
