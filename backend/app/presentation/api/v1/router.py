"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.auth import router as auth_router
from app.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from app.presentation.api.v1.endpoints.categories import router as categories_router
from app.presentation.api.v1.endpoints.products import router as products_router
from app.presentation.api.v1.endpoints.services import router as services_router
from app.presentation.api.v1.endpoints.offers import router as offers_router
from app.presentation.api.v1.endpoints.orders import router as orders_router
from app.presentation.api.v1.endpoints.reservations import router as reservations_router
from app.presentation.api.v1.endpoints.users import router as users_router
from app.presentation.api.v1.endpoints.profile import router as profile_router
from app.presentation.api.v1.endpoints.preferences import router as preferences_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(dashboard_router)
router.include_router(categories_router)
router.include_router(products_router)
router.include_router(services_router)
router.include_router(offers_router)
router.include_router(orders_router)
router.include_router(reservations_router)
router.include_router(users_router)
router.include_router(profile_router)
router.include_router(preferences_router)
