from .user import User
from .catalog import Category, Product, Service, Offer, car_type_label
from .booking import Order, OrderItem, Reservation
from .status import (
    BookingStatus,
    is_open,
    next_statuses,
    normalize_status,
    parse_status,
)
from .upload import ImageUpload
from .dashboard import DashboardStats, PipelineCounts

__all__ = [
    "User",
    "Category",
    "Product",
    "Service",
    "Offer",
    "car_type_label",
    "Order",
    "OrderItem",
    "Reservation",
    "BookingStatus",
    "is_open",
    "next_statuses",
    "normalize_status",
    "parse_status",
    "ImageUpload",
    "DashboardStats",
    "PipelineCounts",
]
