"""Application service (use case) for user accounts and the admin's own profile."""

import logging

from app.application.interfaces import AdminApi
from app.application.services.envelope import records, unwrap_object
from app.application.services.validation import require_text
from app.domain.entities import User

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, api: AdminApi):
        self._api = api

    async def list_users(self, *, search: str | None = None) -> list[User]:
        payload = await self._api.request("GET", "/api/users/all")
        users = [User.from_api(raw) for raw in records(payload, "users")]
        if search:
            users = [u for u in users if u.matches(search)]
        return users

    async def get_profile(self) -> User:
        payload = await self._api.request("GET", "/api/users/me")
        return User.from_api(unwrap_object(payload, "profile"))

    async def update_profile(self, full_name: str, phone: str) -> User:
        full_name = require_text(full_name, "Full name is required.")
        phone = require_text(phone, "Phone is required.")

        payload = await self._api.request(
            "PUT",
            "/api/users/profile",
            json={"fullName": full_name, "phone": phone},
        )
        logger.info("Profile updated for %s", phone)
        return User.from_api(unwrap_object(payload, "profile"))
