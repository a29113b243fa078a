"""Local key/value storage: a JSON file standing in for browser localStorage.

Storage layout:
    <local_storage_file>   one JSON object; values are strings, as in localStorage

Keys in use:
    access_token      bearer token for the Honda Aid API
    app_preferences   JSON-encoded display preferences
"""

import json
import logging
from pathlib import Path
from typing import Any

from app.application.interfaces import PreferencesRepository, TokenStore

logger = logging.getLogger(__name__)

TOKEN_KEY = "access_token"
PREFERENCES_KEY = "app_preferences"


class LocalStorage:
    """Infrastructure adapter for a small JSON key/value file.

    Every write rewrites the whole file. A missing or unreadable file reads
    as empty.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            content = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable local storage %s: %s", self._path, e)
            return {}
        if not isinstance(content, dict):
            logger.warning("Ignoring local storage %s: not a JSON object", self._path)
            return {}
        return {str(k): str(v) for k, v in content.items() if v is not None}

    def _write(self, content: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(content, indent=2), encoding="utf-8")

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        content = self._read()
        content[key] = value
        self._write(content)

    def remove_item(self, key: str) -> None:
        content = self._read()
        if content.pop(key, None) is not None:
            self._write(content)


class LocalStorageTokenStore(TokenStore):
    """Bearer token kept under ``access_token``."""

    def __init__(self, storage: LocalStorage):
        self._storage = storage

    def get_token(self) -> str | None:
        return self._storage.get_item(TOKEN_KEY) or None

    def store_token(self, token: str) -> None:
        self._storage.set_item(TOKEN_KEY, token)

    def remove_token(self) -> None:
        self._storage.remove_item(TOKEN_KEY)


class LocalStoragePreferencesRepository(PreferencesRepository):
    """Preferences kept as a JSON string under ``app_preferences``."""

    def __init__(self, storage: LocalStorage):
        self._storage = storage

    def load(self) -> dict[str, Any] | None:
        raw = self._storage.get_item(PREFERENCES_KEY)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except ValueError:
            logger.warning("Stored preferences are not valid JSON; using defaults")
            return None
        return value if isinstance(value, dict) else None

    def save(self, preferences: dict[str, Any]) -> None:
        self._storage.set_item(PREFERENCES_KEY, json.dumps(preferences))
