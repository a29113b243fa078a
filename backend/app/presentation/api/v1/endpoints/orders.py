"""Order endpoints: list, detail and status changes."""

from fastapi import APIRouter, Depends

from app.application.schemas import OrderResponse, StatusChangeRequest
from app.application.services import OrderService
from app.infrastructure.dependencies import get_order_service

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    search: str | None = None,
    status: str | None = None,
    service: OrderService = Depends(get_order_service),
) -> list[OrderResponse]:
    """List orders, searched by customer name/phone and filtered by status."""
    orders = await service.list_orders(search=search, status=status)
    return [OrderResponse.model_validate(o, from_attributes=True) for o in orders]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    order = await service.get_order(order_id)
    return OrderResponse.model_validate(order, from_attributes=True)


@router.post("/{order_id}/status", response_model=OrderResponse)
async def change_order_status(
    order_id: int,
    data: StatusChangeRequest,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Change an order's status and return the refreshed order.

    ``next_statuses`` in the response is advisory; the API decides.
    """
    order = await service.change_status(order_id, data)
    return OrderResponse.model_validate(order, from_attributes=True)
