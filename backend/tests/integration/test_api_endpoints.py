"""End-to-end tests of the /api/v1 routes with the remote API faked out."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.domain.exceptions import AuthenticationRequiredError, UpstreamApiError
from app.infrastructure.dependencies import get_admin_api, get_local_storage
from app.infrastructure.storage.local_storage import LocalStorage
from app.main import app


@pytest.fixture
def storage(tmp_path) -> LocalStorage:
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture(autouse=True)
def overrides(fake_api, storage):
    app.dependency_overrides[get_admin_api] = lambda: fake_api
    app.dependency_overrides[get_local_storage] = lambda: storage
    yield
    app.dependency_overrides.clear()


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_login_stores_token_and_session_reports_it(fake_api, storage):
    fake_api.on("POST", "/api/auth/login", {"data": {"accessToken": "tok-1", "user": {"id": 1}}})

    async with _client() as client:
        login = await client.post("/api/v1/auth/login", json={"phone": "0999", "password": "pw"})
        session = await client.get("/api/v1/auth/session")

    assert login.status_code == 200
    assert login.json()["message"] == "Login successful"
    assert storage.get_item("access_token") == "tok-1"
    assert session.json() == {"authenticated": True}


@pytest.mark.asyncio
async def test_login_with_missing_fields_is_bad_request():
    async with _client() as client:
        response = await client.post("/api/v1/auth/login", json={"phone": "0999"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Missing required fields"}


@pytest.mark.asyncio
async def test_signup_returns_created(fake_api):
    fake_api.on("POST", "/api/auth/signup", {"message": "ok"})

    async with _client() as client:
        response = await client.post(
            "/api/v1/auth/signup",
            json={"phone": "0999", "password": "pw", "fullName": "Lina Saad"},
        )

    assert response.status_code == 201
    assert fake_api.calls[0]["json"]["fullName"] == "Lina Saad"


@pytest.mark.asyncio
async def test_missing_token_maps_to_unauthorized(fake_api):
    fake_api.on("GET", "/api/categories", AuthenticationRequiredError())

    async with _client() as client:
        response = await client.get("/api/v1/categories")

    assert response.status_code == 401
    assert response.json() == {"detail": "Authentication token not found."}


@pytest.mark.asyncio
async def test_upstream_errors_pass_client_errors_through(fake_api):
    fake_api.on("GET", "/api/offers", UpstreamApiError(403, "Forbidden resource"))
    fake_api.on("GET", "/api/services", UpstreamApiError(500, "Internal server error"))

    async with _client() as client:
        forbidden = await client.get("/api/v1/offers")
        broken = await client.get("/api/v1/services")

    assert forbidden.status_code == 403
    assert forbidden.json() == {"detail": "Forbidden resource"}
    assert broken.status_code == 502


@pytest.mark.asyncio
async def test_unexpected_format_is_bad_gateway(fake_api):
    fake_api.on("GET", "/api/users/all", {"message": "ok"})

    async with _client() as client:
        response = await client.get("/api/v1/users")

    assert response.status_code == 502
    assert response.json() == {"detail": "Received unexpected data format for users."}


@pytest.mark.asyncio
async def test_create_category_multipart(fake_api):
    fake_api.on("POST", "/api/categories", {"data": {"id": 4, "name": "Oils", "image": "u"}})

    async with _client() as client:
        response = await client.post(
            "/api/v1/categories",
            data={"name": "Oils"},
            files={"image": ("oil.png", b"PNGDATA", "image/png")},
        )

    assert response.status_code == 201
    assert response.json()["name"] == "Oils"
    assert fake_api.calls[0]["files"]["image"] == ("oil.png", b"PNGDATA", "image/png")


@pytest.mark.asyncio
async def test_create_category_without_image_is_bad_request(fake_api):
    async with _client() as client:
        response = await client.post("/api/v1/categories", data={"name": "Oils"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Please provide both name and an image."}
    assert fake_api.calls == []


@pytest.mark.asyncio
async def test_list_products_with_filters(fake_api):
    fake_api.on("GET", "/api/products", [
        {"id": 1, "name": "Wiper", "price": 15, "category": {"id": 2, "name": "Glass"}},
        {"id": 2, "name": "Brake pads", "price": 45, "carType": 1,
         "category": {"id": 1, "name": "Brakes"}},
    ])

    async with _client() as client:
        response = await client.get(
            "/api/v1/products", params={"category": "Brakes", "sort_by": "price"}
        )

    assert response.status_code == 200
    body = response.json()
    assert [p["id"] for p in body] == [2]
    assert body[0]["car_type_label"] == "Gasoline"
    assert body[0]["category"]["name"] == "Brakes"


@pytest.mark.asyncio
async def test_delete_product_returns_no_content(fake_api):
    fake_api.on("DELETE", "/api/products/5", None)

    async with _client() as client:
        response = await client.delete("/api/v1/products/5")

    assert response.status_code == 204


@pytest.mark.asyncio
async def test_order_not_found(fake_api):
    async with _client() as client:
        response = await client.get("/api/v1/orders/404")

    assert response.status_code == 404
    assert response.json() == {"detail": "Order with id '404' not found"}


@pytest.mark.asyncio
async def test_change_order_status(fake_api):
    fake_api.on("POST", "/api/orders/change-status", {"message": "ok"})
    fake_api.on("GET", "/api/orders/1", {"data": {"id": 1, "status": "IN_PROGRESS", "totalPrice": 30}})

    async with _client() as client:
        response = await client.post(
            "/api/v1/orders/1/status", json={"status": "inprogress", "note": "started"}
        )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "IN_PROGRESS"
    assert body["next_statuses"] == ["COMPLETED", "CANCELLED"]
    assert fake_api.calls[0]["json"] == {"id": 1, "status": "IN_PROGRESS", "note": "started"}


@pytest.mark.asyncio
async def test_change_status_requires_a_known_status(fake_api):
    async with _client() as client:
        response = await client.post(
            "/api/v1/reservations/1/status", json={"status": "SHIPPED", "note": "x"}
        )

    assert response.status_code == 422
    assert fake_api.calls == []


@pytest.mark.asyncio
async def test_user_reservations(fake_api):
    fake_api.on("GET", "/api/reservations/by-user/3", {"data": [
        {"id": 8, "status": "PENDING", "price": 50, "services": [{"id": 1, "name": "Oil Change"}]},
    ]})

    async with _client() as client:
        response = await client.get("/api/v1/users/3/reservations")

    assert response.status_code == 200
    assert response.json()[0]["services"][0]["name"] == "Oil Change"


@pytest.mark.asyncio
async def test_dashboard_stats(fake_api):
    fake_api.on("GET", "/api/reservations/all", [{"id": 1, "status": "PENDING"}])
    fake_api.on("GET", "/api/orders/all", [{"id": 1, "status": "CANCELED"}])
    fake_api.on("GET", "/api/users/all", UpstreamApiError(500, "down"))

    async with _client() as client:
        response = await client.get("/api/v1/dashboard/stats")

    assert response.status_code == 200
    body = response.json()
    assert body["total_bookings"] == 1
    assert body["upcoming_services"] == 1
    assert body["pipeline"]["cancelled"] == 1
    assert body["new_users_this_week"] == 0


@pytest.mark.asyncio
async def test_profile_update(fake_api):
    fake_api.on("PUT", "/api/users/profile", {"data": {"id": 1, "fullName": "New Name", "phone": "0911"}})

    async with _client() as client:
        response = await client.put(
            "/api/v1/profile", json={"full_name": "New Name", "phone": "0911"}
        )

    assert response.status_code == 200
    assert response.json()["full_name"] == "New Name"
    assert fake_api.calls[0]["json"] == {"fullName": "New Name", "phone": "0911"}


@pytest.mark.asyncio
async def test_preferences_round_trip(storage):
    async with _client() as client:
        defaults = await client.get("/api/v1/preferences")
        updated = await client.put("/api/v1/preferences", json={"language": "ar", "accent": "rose"})
        rejected = await client.put("/api/v1/preferences", json={"theme": "neon"})
        current = await client.get("/api/v1/preferences")

    assert defaults.json()["language"] == "en"
    assert updated.json()["accent"] == "rose"
    assert rejected.status_code == 422
    assert current.json()["language"] == "ar"
    assert storage.get_item("app_preferences") is not None
