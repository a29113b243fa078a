from .auth_service import AuthService
from .category_service import CategoryService
from .dashboard_service import DashboardService
from .offer_service import OfferService
from .order_service import OrderService
from .preferences_service import PreferencesService
from .product_service import ProductService
from .reservation_service import ReservationService
from .service_catalog_service import ServiceCatalogService
from .status_workflow import StatusWorkflow
from .user_service import UserService

__all__ = [
    "AuthService",
    "CategoryService",
    "DashboardService",
    "OfferService",
    "OrderService",
    "PreferencesService",
    "ProductService",
    "ReservationService",
    "ServiceCatalogService",
    "StatusWorkflow",
    "UserService",
]
