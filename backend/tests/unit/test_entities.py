"""Unit tests for mapping raw API records onto domain entities."""

from datetime import datetime, timezone

from app.application.schemas import ProductResponse, ReservationResponse
from app.domain.entities import Category, Order, Product, Reservation, Service, User
from app.domain.entities.fields import as_float, parse_timestamp


def test_parse_timestamp_accepts_trailing_z_and_rejects_garbage():
    assert parse_timestamp("2025-03-01T10:00:00Z") == datetime(
        2025, 3, 1, 10, 0, tzinfo=timezone.utc
    )
    assert parse_timestamp("2025-03-01T10:00:00").tzinfo == timezone.utc
    assert parse_timestamp("yesterday") is None
    assert parse_timestamp(None) is None


def test_as_float_tolerates_numeric_strings():
    assert as_float("12.5") == 12.5
    assert as_float("n/a") == 0.0
    assert as_float(None, default=-1.0) == -1.0


def test_product_from_api_maps_camel_case_and_category():
    product = Product.from_api({
        "id": 3,
        "name": "Brake pads",
        "image": "https://cdn/x.png",
        "price": "45.5",
        "carType": 2,
        "category": {"id": 9, "name": "Brakes"},
        "createdAt": "2025-01-02T00:00:00.000Z",
    })
    assert product.price == 45.5
    assert product.category_name == "Brakes"
    assert product.car_type_label == "Electric"
    assert product.created_at.year == 2025


def test_car_type_labels():
    assert Service.from_api({"id": 1, "carType": 1}).car_type_label == "Gasoline"
    assert Service.from_api({"id": 1, "carType": 3}).car_type_label == "Hybrid"
    assert Service.from_api({"id": 1}).car_type_label == "All Types"
    assert Service.from_api({"id": 1, "carType": 7}).car_type_label == "Unknown"


def test_category_from_api_ignores_non_object_products():
    category = Category.from_api({"id": 1, "name": "Oils", "products": [{"id": 2}, "junk"]})
    assert [p.id for p in category.products] == [2]


def test_order_from_api_accepts_string_items_and_normalizes_status():
    order = Order.from_api({
        "id": 7,
        "user": {"id": 1, "fullName": "Lina Saad", "phone": "0999"},
        "items": [
            "Oil filter",
            {"product": {"id": 4, "name": "Wiper"}, "quantity": 2, "priceAtOrderTime": 10},
        ],
        "totalPrice": 20,
        "status": "canceled",
    })
    assert order.items[0].name == "Oil filter"
    assert order.items[0].product is None
    assert order.items[1].name == "Wiper"
    assert order.items[1].quantity == 2
    assert order.status == "CANCELLED"
    assert order.next_statuses == []
    assert order.matches("lina")
    assert not order.matches("omar")


def test_reservation_matches_id_status_and_service_name():
    reservation = Reservation.from_api({
        "id": 42,
        "status": "PENDING",
        "services": [{"id": 1, "name": "Oil Change"}],
    })
    assert reservation.matches("42")
    assert reservation.matches("pend")
    assert reservation.matches("oil")
    assert not reservation.matches("tyres")


def test_user_matches_name_or_phone():
    user = User.from_api({"id": 1, "fullName": "Sami Haddad", "phone": "0912345678"})
    assert user.matches("HADDAD")
    assert user.matches("1234")
    assert not user.matches("lina")


def test_reservation_without_id_does_not_match_on_none_text():
    reservation = Reservation.from_api({"status": "PENDING"})
    assert not reservation.matches("on")
    assert reservation.matches("pend")


def test_non_string_note_and_image_are_narrowed_to_text():
    reservation = Reservation.from_api({"id": 1, "note": 42})
    assert reservation.note == "42"
    assert ReservationResponse.model_validate(reservation, from_attributes=True).note == "42"

    product = Product.from_api({"id": 2, "image": 7})
    assert ProductResponse.model_validate(product, from_attributes=True).image == "7"
    assert Product.from_api({"id": 3}).image is None
