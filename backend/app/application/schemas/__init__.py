from .auth import AuthMessage, LoginRequest, LogoutRequest, SessionResponse, SignupRequest
from .booking import (
    OrderItemResponse,
    OrderResponse,
    ReservationResponse,
    StatusChangeRequest,
)
from .catalog import (
    CategoryResponse,
    CategorySummary,
    OfferResponse,
    ProductResponse,
    ServiceResponse,
)
from .dashboard import DashboardStatsResponse, PipelineCountsResponse
from .preferences import Preferences, PreferencesUpdate
from .user import ProfileUpdate, UserResponse

__all__ = [
    "AuthMessage",
    "LoginRequest",
    "LogoutRequest",
    "SessionResponse",
    "SignupRequest",
    "OrderItemResponse",
    "OrderResponse",
    "ReservationResponse",
    "StatusChangeRequest",
    "CategoryResponse",
    "CategorySummary",
    "OfferResponse",
    "ProductResponse",
    "ServiceResponse",
    "DashboardStatsResponse",
    "PipelineCountsResponse",
    "Preferences",
    "PreferencesUpdate",
    "ProfileUpdate",
    "UserResponse",
]
