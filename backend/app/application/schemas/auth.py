"""Pydantic DTOs for the login / signup / logout endpoints."""

from pydantic import BaseModel, Field

from app.application.schemas.user import UserResponse


class LoginRequest(BaseModel):
    phone: str = ""
    password: str = ""


class SignupRequest(BaseModel):
    phone: str = ""
    password: str = ""
    full_name: str = Field("", alias="fullName")

    model_config = {"populate_by_name": True}


class LogoutRequest(BaseModel):
    user_id: int = Field(..., alias="userId")
    firebase_token: str = ""

    model_config = {"populate_by_name": True}


class AuthMessage(BaseModel):
    message: str
    user: UserResponse | None = None


class SessionResponse(BaseModel):
    authenticated: bool
