from .admin_api import AdminApi
from .token_store import TokenStore
from .preferences_repository import PreferencesRepository

__all__ = [
    "AdminApi",
    "TokenStore",
    "PreferencesRepository",
]
