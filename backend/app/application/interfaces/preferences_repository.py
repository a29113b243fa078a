"""Abstract persistence (port) for dashboard display preferences."""

from abc import ABC, abstractmethod
from typing import Any


class PreferencesRepository(ABC):

    @abstractmethod
    def load(self) -> dict[str, Any] | None:
        """Return the raw stored preferences, or None if nothing is stored."""
        ...

    @abstractmethod
    def save(self, preferences: dict[str, Any]) -> None:
        ...
