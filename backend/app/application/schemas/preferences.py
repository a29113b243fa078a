"""Pydantic DTOs for the dashboard display preferences."""

from typing import Literal

from pydantic import BaseModel

Language = Literal["en", "ar", "fr"]
Currency = Literal["USD", "EUR", "GBP"]
Theme = Literal["system", "light", "dark"]
Accent = Literal["cyan", "blue", "emerald", "violet", "rose"]
Density = Literal["comfortable", "compact"]


class Preferences(BaseModel):
    """Stored preferences; every field has the dashboard's default."""

    language: Language = "en"
    currency: Currency = "USD"
    date_format: str = "YYYY-MM-DD"
    number_format: str = "1,234.56"
    theme: Theme = "system"
    accent: Accent = "cyan"
    density: Density = "comfortable"


class PreferencesUpdate(BaseModel):
    """Partial update: only the provided fields change."""

    language: Language | None = None
    currency: Currency | None = None
    date_format: str | None = None
    number_format: str | None = None
    theme: Theme | None = None
    accent: Accent | None = None
    density: Density | None = None
