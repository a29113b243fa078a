"""Domain entities for customer bookings: shop orders and service reservations."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .catalog import Product, Service
from .fields import as_float, as_int, as_optional_str, as_str, parse_timestamp
from .status import is_open, next_statuses, normalize_status
from .user import User


@dataclass
class OrderItem:
    """One line of an order.

    The order-detail endpoint sometimes returns items as plain strings;
    those keep their text in ``name`` and have no product.
    """

    name: str = ""
    product: Product | None = None
    quantity: int = 1
    price_at_order_time: float = 0.0

    @classmethod
    def from_api(cls, raw: Any) -> "OrderItem":
        if not isinstance(raw, dict):
            return cls(name=as_str(raw))
        product = raw.get("product")
        parsed = Product.from_api(product) if isinstance(product, dict) else None
        return cls(
            name=parsed.name if parsed else as_str(raw.get("name")),
            product=parsed,
            quantity=as_int(raw.get("quantity")) or 1,
            price_at_order_time=as_float(
                raw.get("priceAtOrderTime", raw.get("price"))
            ),
        )


@dataclass
class Order:
    id: int | str | None
    user: User | None = None
    items: list[OrderItem] = field(default_factory=list)
    total_price: float = 0.0
    status: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Order":
        user = raw.get("user")
        items = raw.get("items")
        return cls(
            id=raw.get("id"),
            user=User.from_api(user) if isinstance(user, dict) else None,
            items=[OrderItem.from_api(i) for i in items] if isinstance(items, list) else [],
            total_price=as_float(raw.get("totalPrice")),
            status=normalize_status(raw.get("status")),
            created_at=parse_timestamp(raw.get("createdAt")),
            updated_at=parse_timestamp(raw.get("updatedAt")),
        )

    @property
    def next_statuses(self) -> list[str]:
        return next_statuses(self.status)

    @property
    def is_open(self) -> bool:
        return is_open(self.status)

    def matches(self, search: str) -> bool:
        """Orders are searched by the customer's name or phone."""
        if self.user is None:
            return not search
        return self.user.matches(search)


@dataclass
class Reservation:
    id: int | str | None
    services: list[Service] = field(default_factory=list)
    price: float = 0.0
    note: str | None = None
    status: str = ""
    created_at: datetime | None = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Reservation":
        services = raw.get("services")
        return cls(
            id=raw.get("id"),
            services=[
                Service.from_api(s) for s in services if isinstance(s, dict)
            ] if isinstance(services, list) else [],
            price=as_float(raw.get("price")),
            note=as_optional_str(raw.get("note")),
            status=normalize_status(raw.get("status")),
            created_at=parse_timestamp(raw.get("createdAt")),
        )

    @property
    def next_statuses(self) -> list[str]:
        return next_statuses(self.status)

    @property
    def is_open(self) -> bool:
        return is_open(self.status)

    def matches(self, search: str) -> bool:
        """Match on id, status, or any booked service name."""
        needle = search.lower()
        return (
            (self.id is not None and search in str(self.id))
            or needle in self.status.lower()
            or any(needle in s.name.lower() for s in self.services)
        )
