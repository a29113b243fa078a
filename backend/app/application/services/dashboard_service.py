"""Application service computing the dashboard home page figures."""

import asyncio
import logging
from datetime import date, datetime, timedelta, timezone

from app.application.interfaces import AdminApi
from app.application.services.envelope import records
from app.domain.entities import (
    BookingStatus,
    DashboardStats,
    Order,
    PipelineCounts,
    Reservation,
    User,
)

logger = logging.getLogger(__name__)

NEW_USER_WINDOW = timedelta(days=7)


def count_pipeline(orders: list[Order]) -> PipelineCounts:
    counts = PipelineCounts()
    for order in orders:
        if order.status == BookingStatus.PENDING.value:
            counts.pending += 1
        elif order.status == BookingStatus.IN_PROGRESS.value:
            counts.in_progress += 1
        elif order.status == BookingStatus.COMPLETED.value:
            counts.completed += 1
        elif order.status == BookingStatus.CANCELLED.value:
            counts.cancelled += 1
    return counts


def last_completed_date(orders: list[Order]) -> date | None:
    """Date of the most recent completed order, or None."""
    stamps = [
        o.created_at or o.updated_at
        for o in orders
        if o.status == BookingStatus.COMPLETED.value
    ]
    stamps = [s for s in stamps if s is not None]
    if not stamps:
        return None
    return max(stamps).astimezone(timezone.utc).date()


def count_new_users(users: list[User], now: datetime) -> int:
    return sum(
        1 for u in users
        if u.created_at is not None and now - u.created_at <= NEW_USER_WINDOW
    )


class DashboardService:
    """Loads reservations, orders and users concurrently and summarizes them."""

    def __init__(self, api: AdminApi):
        self._api = api

    async def _load(self, path: str, resource: str) -> list[dict]:
        payload = await self._api.request("GET", path)
        return records(payload, resource)

    async def get_stats(self, now: datetime | None = None) -> DashboardStats:
        now = now or datetime.now(timezone.utc)
        results = await asyncio.gather(
            self._load("/api/reservations/all", "reservations"),
            self._load("/api/orders/all", "orders"),
            self._load("/api/users/all", "users"),
            return_exceptions=True,
        )
        reservations_raw, orders_raw, users_raw = results

        stats = DashboardStats()

        for name, result in zip(("reservations", "orders", "users"), results):
            if isinstance(result, BaseException):
                logger.warning("Dashboard: could not load %s: %s", name, result)

        if not isinstance(reservations_raw, BaseException):
            reservations = [Reservation.from_api(r) for r in reservations_raw]
            stats.total_bookings = len(reservations)
            stats.upcoming_services = sum(1 for r in reservations if r.is_open)

        if not isinstance(orders_raw, BaseException):
            orders = [Order.from_api(o) for o in orders_raw]
            stats.pipeline = count_pipeline(orders)
            stats.last_service_date = last_completed_date(orders)

        if not isinstance(users_raw, BaseException):
            users = [User.from_api(u) for u in users_raw]
            stats.new_users_this_week = count_new_users(users, now)
            stats.returning_users = max(len(users) - stats.new_users_this_week, 0)

        return stats
