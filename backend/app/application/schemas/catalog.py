"""Pydantic DTOs for categories, products, services and offers."""

from datetime import datetime

from pydantic import BaseModel


class CategorySummary(BaseModel):
    """Category as embedded in a product."""

    id: int | str | None
    name: str
    image: str | None

    model_config = {"from_attributes": True}


class ProductResponse(BaseModel):
    id: int | str | None
    name: str
    image: str | None
    price: float
    category: CategorySummary | None
    car_type: int | None
    car_type_label: str
    created_at: datetime | None

    model_config = {"from_attributes": True}


class CategoryResponse(BaseModel):
    id: int | str | None
    name: str
    image: str | None
    products: list[ProductResponse]
    created_at: datetime | None

    model_config = {"from_attributes": True}


class ServiceResponse(BaseModel):
    id: int | str | None
    name: str
    image: str | None
    price: float
    description: str
    car_type: int | None
    car_type_label: str
    created_at: datetime | None

    model_config = {"from_attributes": True}


class OfferResponse(BaseModel):
    id: int | str | None
    title: str
    image: str | None
    created_at: datetime | None

    model_config = {"from_attributes": True}
