"""Domain entities for the sellable catalogue: categories, products, services, offers."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .fields import as_float, as_int, as_optional_str, as_str, parse_timestamp

CAR_TYPE_LABELS = {
    1: "Gasoline",
    2: "Electric",
    3: "Hybrid",
}
ALL_CAR_TYPES_LABEL = "All Types"


def car_type_label(car_type: int | None) -> str:
    """Human-readable label for the numeric ``carType`` field."""
    if car_type is None:
        return ALL_CAR_TYPES_LABEL
    return CAR_TYPE_LABELS.get(car_type, "Unknown")


@dataclass
class Product:
    """A part or accessory sold through the shop."""

    id: int | str | None
    name: str = ""
    image: str | None = None
    price: float = 0.0
    category: "Category | None" = None
    car_type: int | None = None
    created_at: datetime | None = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Product":
        category = raw.get("category")
        return cls(
            id=raw.get("id"),
            name=as_str(raw.get("name")),
            image=as_optional_str(raw.get("image")),
            price=as_float(raw.get("price")),
            category=Category.from_api(category) if isinstance(category, dict) else None,
            car_type=as_int(raw.get("carType")),
            created_at=parse_timestamp(raw.get("createdAt")),
        )

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category else None

    @property
    def car_type_label(self) -> str:
        return car_type_label(self.car_type)


@dataclass
class Category:
    """Product grouping. ``products`` is only populated by some endpoints."""

    id: int | str | None
    name: str = ""
    image: str | None = None
    products: list[Product] = field(default_factory=list)
    created_at: datetime | None = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Category":
        products = raw.get("products")
        return cls(
            id=raw.get("id"),
            name=as_str(raw.get("name")),
            image=as_optional_str(raw.get("image")),
            products=[
                Product.from_api(p) for p in products if isinstance(p, dict)
            ] if isinstance(products, list) else [],
            created_at=parse_timestamp(raw.get("createdAt")),
        )


@dataclass
class Service:
    """A bookable workshop service (oil change, inspection, ...)."""

    id: int | str | None
    name: str = ""
    image: str | None = None
    price: float = 0.0
    description: str = ""
    car_type: int | None = None
    created_at: datetime | None = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Service":
        return cls(
            id=raw.get("id"),
            name=as_str(raw.get("name")),
            image=as_optional_str(raw.get("image")),
            price=as_float(raw.get("price")),
            description=as_str(raw.get("description")),
            car_type=as_int(raw.get("carType")),
            created_at=parse_timestamp(raw.get("createdAt")),
        )

    @property
    def car_type_label(self) -> str:
        return car_type_label(self.car_type)


@dataclass
class Offer:
    """A promotional banner."""

    id: int | str | None
    title: str = ""
    image: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Offer":
        return cls(
            id=raw.get("id"),
            title=as_str(raw.get("title")),
            image=as_optional_str(raw.get("image")),
            created_at=parse_timestamp(raw.get("createdAt")),
        )
