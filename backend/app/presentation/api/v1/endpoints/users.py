"""User listing and per-user order / reservation history."""

from fastapi import APIRouter, Depends

from app.application.schemas import OrderResponse, ReservationResponse, UserResponse
from app.application.services import OrderService, ReservationService, UserService
from app.infrastructure.dependencies import (
    get_order_service,
    get_reservation_service,
    get_user_service,
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    search: str | None = None,
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """List users, optionally searched by full name or phone."""
    users = await service.list_users(search=search)
    return [UserResponse.model_validate(u, from_attributes=True) for u in users]


@router.get("/{user_id}/orders", response_model=list[OrderResponse])
async def list_user_orders(
    user_id: int,
    service: OrderService = Depends(get_order_service),
) -> list[OrderResponse]:
    orders = await service.list_user_orders(user_id)
    return [OrderResponse.model_validate(o, from_attributes=True) for o in orders]


@router.get("/{user_id}/reservations", response_model=list[ReservationResponse])
async def list_user_reservations(
    user_id: int,
    service: ReservationService = Depends(get_reservation_service),
) -> list[ReservationResponse]:
    reservations = await service.list_user_reservations(user_id)
    return [
        ReservationResponse.model_validate(r, from_attributes=True) for r in reservations
    ]
