"""Application service for the dashboard's display preferences.

Preferences are a single record in local storage. Each stored key is
validated on its own, so one bad value falls back to its default without
discarding the rest.
"""

import logging
from typing import Any

from pydantic import ValidationError

from app.application.interfaces import PreferencesRepository
from app.application.schemas.preferences import Preferences, PreferencesUpdate

logger = logging.getLogger(__name__)


class PreferencesService:

    def __init__(self, repository: PreferencesRepository):
        self._repository = repository

    def get_preferences(self) -> Preferences:
        raw = self._repository.load()
        if not isinstance(raw, dict):
            return Preferences()
        return self._merge(Preferences().model_dump(), raw)

    def update_preferences(self, update: PreferencesUpdate) -> Preferences:
        current = self.get_preferences().model_dump()
        updated = Preferences.model_validate(
            {**current, **update.model_dump(exclude_unset=True, exclude_none=True)}
        )
        self._repository.save(updated.model_dump())
        logger.info("Preferences updated: %s", updated.model_dump())
        return updated

    @staticmethod
    def _merge(defaults: dict[str, Any], raw: dict[str, Any]) -> Preferences:
        merged = dict(defaults)
        for key in defaults:
            if key not in raw:
                continue
            candidate = {**merged, key: raw[key]}
            try:
                Preferences.model_validate(candidate)
            except ValidationError:
                logger.warning("Ignoring invalid stored preference %s=%r", key, raw[key])
                continue
            merged = candidate
        return Preferences.model_validate(merged)
