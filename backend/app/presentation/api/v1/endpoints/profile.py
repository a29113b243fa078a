"""The signed-in admin's own profile."""

from fastapi import APIRouter, Depends

from app.application.schemas import ProfileUpdate, UserResponse
from app.application.services import UserService
from app.infrastructure.dependencies import get_user_service

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=UserResponse)
async def get_profile(service: UserService = Depends(get_user_service)) -> UserResponse:
    user = await service.get_profile()
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("", response_model=UserResponse)
async def update_profile(
    data: ProfileUpdate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.update_profile(data.full_name, data.phone)
    return UserResponse.model_validate(user, from_attributes=True)
