"""Login / signup / logout endpoints: forwarded to the Honda Aid API."""

from fastapi import APIRouter, Depends, status

from app.application.schemas import (
    AuthMessage,
    LoginRequest,
    LogoutRequest,
    SessionResponse,
    SignupRequest,
    UserResponse,
)
from app.application.services import AuthService
from app.infrastructure.dependencies import get_auth_service

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=AuthMessage)
async def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthMessage:
    """Sign in and keep the returned bearer token for later calls."""
    user = await service.login(data.phone, data.password)
    return AuthMessage(
        message="Login successful",
        user=UserResponse.model_validate(user, from_attributes=True) if user else None,
    )


@router.post("/signup", response_model=AuthMessage, status_code=status.HTTP_201_CREATED)
async def signup(
    data: SignupRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthMessage:
    await service.signup(data.phone, data.password, data.full_name)
    return AuthMessage(message="User created successfully")


@router.post("/logout", response_model=AuthMessage)
async def logout(
    data: LogoutRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthMessage:
    """Log out remotely and forget the stored token."""
    await service.logout(data.user_id, data.firebase_token)
    return AuthMessage(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def me(service: AuthService = Depends(get_auth_service)) -> UserResponse:
    user = await service.me()
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("/session", response_model=SessionResponse)
async def session(service: AuthService = Depends(get_auth_service)) -> SessionResponse:
    """Whether a bearer token is currently stored."""
    return SessionResponse(authenticated=service.is_authenticated())
