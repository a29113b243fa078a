"""Application service for signing the dashboard in and out of the Honda Aid API."""

import logging
from typing import Any

from app.application.interfaces import AdminApi, TokenStore
from app.application.services.envelope import unwrap_object
from app.application.services.validation import require_text
from app.domain.entities import User
from app.domain.exceptions import UpstreamApiError

logger = logging.getLogger(__name__)


def extract_token(payload: Any) -> str | None:
    """Find the bearer token in a login response.

    The API has answered with ``data.accessToken``, ``data.access_token``
    and a top-level ``token`` over time; the first non-empty one wins.
    """
    if not isinstance(payload, dict):
        return None
    data = payload.get("data")
    if isinstance(data, dict):
        for key in ("accessToken", "access_token"):
            if data.get(key):
                return str(data[key])
    if payload.get("token"):
        return str(payload["token"])
    return None


class AuthService:
    """Login, signup, logout and current-user lookups.

    The token obtained at login is kept in the TokenStore and attached to
    every later API call by the AdminApi adapter.
    """

    def __init__(self, api: AdminApi, tokens: TokenStore, firebase_token: str = "STR"):
        self._api = api
        self._tokens = tokens
        self._firebase_token = firebase_token

    async def login(self, phone: str, password: str) -> User | None:
        phone = require_text(phone, "Missing required fields")
        password = require_text(password, "Missing required fields")

        payload = await self._api.request(
            "POST",
            "/api/auth/login",
            json={
                "phone": phone,
                "password": password,
                "firebase_token": self._firebase_token,
            },
            authenticated=False,
        )
        token = extract_token(payload)
        if not token:
            raise UpstreamApiError(401, "Login response did not contain a token")

        self._tokens.store_token(token)
        logger.info("Logged in as %s", phone)

        data = payload.get("data") if isinstance(payload, dict) else None
        user = data.get("user") if isinstance(data, dict) else None
        if isinstance(user, dict):
            return User.from_api(user)
        return None

    async def signup(self, phone: str, password: str, full_name: str) -> Any:
        phone = require_text(phone, "Missing required fields")
        password = require_text(password, "Missing required fields")
        full_name = require_text(full_name, "Missing required fields")

        payload = await self._api.request(
            "POST",
            "/api/auth/signup",
            json={
                "phone": phone,
                "password": password,
                "fullName": full_name,
                "firebase_token": self._firebase_token,
            },
            authenticated=False,
        )
        logger.info("Signed up %s", phone)
        return payload

    async def logout(self, user_id: int, firebase_token: str) -> None:
        """Log out remotely; the local token is dropped even if that fails."""
        firebase_token = require_text(firebase_token, "Missing required fields")
        try:
            await self._api.request(
                "POST",
                "/api/auth/logout",
                json={"userId": user_id, "firebase_token": firebase_token},
            )
        finally:
            self._tokens.remove_token()
            logger.info("Logged out user %s", user_id)

    async def me(self) -> User:
        payload = await self._api.request("GET", "/api/auth/me")
        return User.from_api(unwrap_object(payload, "user"))

    def is_authenticated(self) -> bool:
        return bool(self._tokens.get_token())
