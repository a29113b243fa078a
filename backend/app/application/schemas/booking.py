"""Pydantic DTOs for orders, reservations and their status changes."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.application.schemas.catalog import ProductResponse, ServiceResponse
from app.application.schemas.user import UserResponse
from app.domain.entities import BookingStatus, parse_status


class StatusChangeRequest(BaseModel):
    """Body of a status change: ``date``/``time`` are forwarded only when set."""

    status: str = Field(..., examples=["ACCEPTED"])
    note: str = Field(..., examples=["Parts arrive on Monday"])
    date: str | None = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$", examples=["2025-06-01"])
    time: str | None = Field(None, pattern=r"^\d{2}:\d{2}$", examples=["09:30"])

    @field_validator("status")
    @classmethod
    def _known_status(cls, value: str) -> str:
        status = parse_status(value)
        if status is None:
            allowed = ", ".join(s.value for s in BookingStatus)
            raise ValueError(f"Unknown status '{value}'. Expected one of: {allowed}")
        return status.value

    @field_validator("note")
    @classmethod
    def _note_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("A note is required.")
        return value.strip()


class OrderItemResponse(BaseModel):
    name: str
    product: ProductResponse | None
    quantity: int
    price_at_order_time: float

    model_config = {"from_attributes": True}


class OrderResponse(BaseModel):
    id: int | str | None
    user: UserResponse | None
    items: list[OrderItemResponse]
    total_price: float
    status: str
    next_statuses: list[str]
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}


class ReservationResponse(BaseModel):
    id: int | str | None
    services: list[ServiceResponse]
    price: float
    note: str | None
    status: str
    next_statuses: list[str]
    created_at: datetime | None

    model_config = {"from_attributes": True}
