"""Pydantic DTOs for users and the admin profile."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    id: int | str | None
    full_name: str
    phone: str
    role: str
    created_at: datetime | None

    model_config = {"from_attributes": True}


class ProfileUpdate(BaseModel):
    """Schema for updating the signed-in admin's profile."""

    full_name: str = Field(..., min_length=1, examples=["Sami Haddad"])
    phone: str = Field(..., min_length=1, examples=["0912345678"])
