"""Display preferences (language, currency, theme, ...) kept in local storage."""

from fastapi import APIRouter, Depends

from app.application.schemas import Preferences, PreferencesUpdate
from app.application.services import PreferencesService
from app.infrastructure.dependencies import get_preferences_service

router = APIRouter(prefix="/preferences", tags=["Preferences"])


@router.get("", response_model=Preferences)
async def get_preferences(
    service: PreferencesService = Depends(get_preferences_service),
) -> Preferences:
    """Stored preferences; missing or corrupt values fall back to defaults."""
    return service.get_preferences()


@router.put("", response_model=Preferences)
async def update_preferences(
    data: PreferencesUpdate,
    service: PreferencesService = Depends(get_preferences_service),
) -> Preferences:
    """Merge the given fields into the stored preferences."""
    return service.update_preferences(data)
