"""Unit tests for orders, reservations and the shared status workflow."""

import pytest
from pydantic import ValidationError

from app.application.schemas import StatusChangeRequest
from app.application.services import OrderService, ReservationService, StatusWorkflow
from app.application.services.order_service import filter_orders
from app.application.services.reservation_service import filter_reservations
from app.domain.entities import Order, Reservation
from app.domain.exceptions import EntityNotFoundError, UpstreamApiError

ORDERS = [
    {"id": 1, "status": "PENDING", "user": {"id": 1, "fullName": "Lina Saad", "phone": "0911"}},
    {"id": 2, "status": "canceled", "user": {"id": 2, "fullName": "Omar Aziz", "phone": "0922"}},
    {"id": 3, "status": "CANCELLED"},
]

RESERVATIONS = [
    {"id": 10, "status": "PENDING", "services": [{"id": 1, "name": "Oil Change"}]},
    {"id": 11, "status": "COMPLETED", "services": [{"id": 2, "name": "Inspection"}]},
]


# ── Status change request ──


def test_status_change_request_canonicalizes_status():
    request = StatusChangeRequest(status="canceled", note="  customer called ")
    assert request.status == "CANCELLED"
    assert request.note == "customer called"


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "SHIPPED", "note": "x"},
        {"status": "ACCEPTED", "note": "   "},
        {"status": "ACCEPTED", "note": "x", "date": "01/06/2025"},
        {"status": "ACCEPTED", "note": "x", "time": "9am"},
    ],
)
def test_status_change_request_rejects_invalid_input(payload):
    with pytest.raises(ValidationError):
        StatusChangeRequest(**payload)


def test_build_body_forwards_date_and_time_only_when_set():
    bare = StatusWorkflow.build_body("12", StatusChangeRequest(status="ACCEPTED", note="ok"))
    assert bare == {"id": 12, "status": "ACCEPTED", "note": "ok"}

    scheduled = StatusWorkflow.build_body(
        12,
        StatusChangeRequest(status="ACCEPTED", note="ok", date="2025-06-01", time="09:30"),
    )
    assert scheduled["date"] == "2025-06-01"
    assert scheduled["time"] == "09:30"


# ── Orders ──


def test_filter_orders_by_customer_and_normalized_status():
    orders = [Order.from_api(o) for o in ORDERS]
    assert [o.id for o in filter_orders(orders, search="lina")] == [1]
    assert [o.id for o in filter_orders(orders, search="0922")] == [2]
    assert [o.id for o in filter_orders(orders, status="Canceled")] == [2, 3]


@pytest.mark.asyncio
async def test_list_orders_applies_filters(fake_api):
    fake_api.on("GET", "/api/orders", {"data": ORDERS})
    orders = await OrderService(fake_api).list_orders(status="pending")
    assert [o.id for o in orders] == [1]


@pytest.mark.asyncio
async def test_change_order_status_posts_then_refetches(fake_api):
    fake_api.on("POST", "/api/orders/change-status", {"message": "ok"})
    fake_api.on("GET", "/api/orders/1", {"data": {"id": 1, "status": "ACCEPTED"}})

    order = await OrderService(fake_api).change_status(
        1, StatusChangeRequest(status="ACCEPTED", note="parts in stock")
    )

    assert order.status == "ACCEPTED"
    assert order.next_statuses == ["IN_PROGRESS", "COMPLETED", "CANCELLED"]
    assert fake_api.paths() == [
        ("POST", "/api/orders/change-status"),
        ("GET", "/api/orders/1"),
    ]
    assert fake_api.calls[0]["json"] == {"id": 1, "status": "ACCEPTED", "note": "parts in stock"}


@pytest.mark.asyncio
async def test_change_status_surfaces_server_rejection(fake_api):
    fake_api.on("POST", "/api/orders/change-status", UpstreamApiError(400, "Invalid transition"))

    with pytest.raises(UpstreamApiError, match="Invalid transition"):
        await OrderService(fake_api).change_status(
            1, StatusChangeRequest(status="COMPLETED", note="done")
        )
    assert len(fake_api.calls) == 1


@pytest.mark.asyncio
async def test_get_missing_order(fake_api):
    with pytest.raises(EntityNotFoundError):
        await OrderService(fake_api).get_order(77)


@pytest.mark.asyncio
async def test_list_user_orders(fake_api):
    fake_api.on("GET", "/api/orders/by-user/1", [ORDERS[0]])
    orders = await OrderService(fake_api).list_user_orders(1)
    assert [o.id for o in orders] == [1]


# ── Reservations ──


def test_filter_reservations_by_service_name_and_status():
    reservations = [Reservation.from_api(r) for r in RESERVATIONS]
    assert [r.id for r in filter_reservations(reservations, search="inspect")] == [11]
    assert [r.id for r in filter_reservations(reservations, status="pending")] == [10]


@pytest.mark.asyncio
async def test_change_reservation_status_refreshes_from_list(fake_api):
    fake_api.on("POST", "/api/reservations/change-status", {"message": "ok"})
    fake_api.on("GET", "/api/reservations/all", {"data": [
        {"id": 10, "status": "ACCEPTED"},
        RESERVATIONS[1],
    ]})

    reservation = await ReservationService(fake_api).change_status(
        10, StatusChangeRequest(status="ACCEPTED", note="booked", date="2025-06-01")
    )

    assert reservation.status == "ACCEPTED"
    assert fake_api.calls[0]["json"]["date"] == "2025-06-01"


@pytest.mark.asyncio
async def test_change_reservation_status_missing_after_refresh(fake_api):
    fake_api.on("POST", "/api/reservations/change-status", {"message": "ok"})
    fake_api.on("GET", "/api/reservations/all", [])

    with pytest.raises(EntityNotFoundError):
        await ReservationService(fake_api).change_status(
            10, StatusChangeRequest(status="ACCEPTED", note="booked")
        )
