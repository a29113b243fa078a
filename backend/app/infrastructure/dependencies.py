"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends

from app.config import get_settings
from app.application.interfaces import AdminApi, PreferencesRepository, TokenStore
from app.application.services import (
    AuthService,
    CategoryService,
    DashboardService,
    OfferService,
    OrderService,
    PreferencesService,
    ProductService,
    ReservationService,
    ServiceCatalogService,
    UserService,
)
from app.infrastructure.honda_aid import HondaAidApiClient
from app.infrastructure.storage.local_storage import (
    LocalStorage,
    LocalStoragePreferencesRepository,
    LocalStorageTokenStore,
)


@lru_cache
def get_local_storage() -> LocalStorage:
    """Singleton key/value store backing the token and preferences."""
    return LocalStorage(get_settings().local_storage_file)


def get_token_store(
    storage: LocalStorage = Depends(get_local_storage),
) -> TokenStore:
    return LocalStorageTokenStore(storage)


def get_preferences_repository(
    storage: LocalStorage = Depends(get_local_storage),
) -> PreferencesRepository:
    return LocalStoragePreferencesRepository(storage)


async def get_admin_api(
    tokens: TokenStore = Depends(get_token_store),
) -> AsyncGenerator[AdminApi, None]:
    """Provides the Honda Aid API client bound to the stored bearer token."""
    settings = get_settings()
    yield HondaAidApiClient(
        base_url=settings.api_base_url,
        token_store=tokens,
        timeout=settings.api_timeout,
    )


async def get_auth_service(
    api: AdminApi = Depends(get_admin_api),
    tokens: TokenStore = Depends(get_token_store),
) -> AsyncGenerator[AuthService, None]:
    yield AuthService(api, tokens, firebase_token=get_settings().firebase_token)


async def get_category_service(
    api: AdminApi = Depends(get_admin_api),
) -> AsyncGenerator[CategoryService, None]:
    yield CategoryService(api)


async def get_product_service(
    api: AdminApi = Depends(get_admin_api),
) -> AsyncGenerator[ProductService, None]:
    yield ProductService(api)


async def get_service_catalog_service(
    api: AdminApi = Depends(get_admin_api),
) -> AsyncGenerator[ServiceCatalogService, None]:
    yield ServiceCatalogService(api)


async def get_offer_service(
    api: AdminApi = Depends(get_admin_api),
) -> AsyncGenerator[OfferService, None]:
    yield OfferService(api)


async def get_order_service(
    api: AdminApi = Depends(get_admin_api),
) -> AsyncGenerator[OrderService, None]:
    yield OrderService(api)


async def get_reservation_service(
    api: AdminApi = Depends(get_admin_api),
) -> AsyncGenerator[ReservationService, None]:
    yield ReservationService(api)


async def get_user_service(
    api: AdminApi = Depends(get_admin_api),
) -> AsyncGenerator[UserService, None]:
    yield UserService(api)


async def get_dashboard_service(
    api: AdminApi = Depends(get_admin_api),
) -> AsyncGenerator[DashboardService, None]:
    """Provides the dashboard stats service (concurrent fan-out over three lists)."""
    yield DashboardService(api)


async def get_preferences_service(
    repository: PreferencesRepository = Depends(get_preferences_repository),
) -> AsyncGenerator[PreferencesService, None]:
    yield PreferencesService(repository)
