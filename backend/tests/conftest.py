"""Shared in-memory fakes for the application ports."""

from typing import Any

import pytest

from app.application.interfaces import AdminApi, PreferencesRepository, TokenStore
from app.domain.exceptions import UpstreamApiError


class FakeAdminApi(AdminApi):
    """Scripted fake of the remote API.

    Responses are registered per ``(method, path)``; an Exception instance is
    raised instead of returned. Unregistered routes answer with a 404.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], Any] = {}
        self.calls: list[dict[str, Any]] = []

    def on(self, method: str, path: str, response: Any) -> "FakeAdminApi":
        self.routes[(method, path)] = response
        return self

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, tuple[str, bytes, str]] | None = None,
        authenticated: bool = True,
    ) -> Any:
        self.calls.append({
            "method": method,
            "path": path,
            "params": params,
            "json": json,
            "data": data,
            "files": files,
            "authenticated": authenticated,
        })
        if (method, path) not in self.routes:
            raise UpstreamApiError(404, f"Cannot {method} {path}")
        response = self.routes[(method, path)]
        if isinstance(response, Exception):
            raise response
        return response

    def paths(self) -> list[tuple[str, str]]:
        return [(c["method"], c["path"]) for c in self.calls]


class FakeTokenStore(TokenStore):

    def __init__(self, token: str | None = None):
        self.token = token

    def get_token(self) -> str | None:
        return self.token

    def store_token(self, token: str) -> None:
        self.token = token

    def remove_token(self) -> None:
        self.token = None


class FakePreferencesRepository(PreferencesRepository):

    def __init__(self, stored: dict[str, Any] | None = None):
        self.stored = stored

    def load(self) -> dict[str, Any] | None:
        return self.stored

    def save(self, preferences: dict[str, Any]) -> None:
        self.stored = dict(preferences)


@pytest.fixture
def fake_api() -> FakeAdminApi:
    return FakeAdminApi()


@pytest.fixture
def token_store() -> FakeTokenStore:
    return FakeTokenStore()


@pytest.fixture
def preferences_repository() -> FakePreferencesRepository:
    return FakePreferencesRepository()
