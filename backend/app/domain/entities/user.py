"""Domain entity: an account of the Honda Aid service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .fields import as_str, parse_timestamp


@dataclass
class User:
    """Customer or administrator as returned by ``/api/users`` and ``/api/auth/me``."""

    id: int | str | None
    full_name: str = ""
    phone: str = ""
    role: str = ""
    created_at: datetime | None = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "User":
        return cls(
            id=raw.get("id"),
            full_name=as_str(raw.get("fullName")),
            phone=as_str(raw.get("phone")),
            role=as_str(raw.get("role")),
            created_at=parse_timestamp(raw.get("createdAt")),
        )

    def matches(self, search: str) -> bool:
        """Case-insensitive substring match on full name or phone."""
        needle = search.lower()
        return needle in self.full_name.lower() or needle in self.phone.lower()
