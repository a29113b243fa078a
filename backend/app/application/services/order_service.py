"""Application service (use case) for shop orders."""

from app.application.interfaces import AdminApi
from app.application.schemas.booking import StatusChangeRequest
from app.application.services.envelope import fetch_object, records
from app.application.services.status_workflow import StatusWorkflow
from app.domain.entities import Order, normalize_status


def filter_orders(
    orders: list[Order], *, search: str | None = None, status: str | None = None
) -> list[Order]:
    """Search by customer name/phone and filter by (normalized) status."""
    selected = orders
    if search:
        selected = [o for o in selected if o.matches(search)]
    if status:
        wanted = normalize_status(status)
        selected = [o for o in selected if o.status == wanted]
    return selected


class OrderService:
    """Lists orders and drives their status changes."""

    def __init__(self, api: AdminApi):
        self._api = api
        self._workflow = StatusWorkflow(api, "orders", "Order")

    async def list_orders(
        self, *, search: str | None = None, status: str | None = None
    ) -> list[Order]:
        payload = await self._api.request("GET", "/api/orders")
        orders = [Order.from_api(raw) for raw in records(payload, "orders")]
        return filter_orders(orders, search=search, status=status)

    async def get_order(self, order_id: int | str) -> Order:
        raw = await fetch_object(self._api, f"/api/orders/{order_id}", "Order", order_id)
        return Order.from_api(raw)

    async def list_user_orders(self, user_id: int | str) -> list[Order]:
        payload = await self._api.request("GET", f"/api/orders/by-user/{user_id}")
        return [Order.from_api(raw) for raw in records(payload, "orders")]

    async def change_status(
        self, order_id: int | str, request: StatusChangeRequest
    ) -> Order:
        """Post the new status, then re-fetch the order from the API."""
        await self._workflow.change_status(order_id, request)
        return await self.get_order(order_id)
