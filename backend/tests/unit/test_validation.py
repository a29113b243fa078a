"""Unit tests for the form input checks."""

import pytest

from app.application.services.validation import format_price, parse_price, require_image, require_text
from app.domain.entities import ImageUpload
from app.domain.exceptions import InvalidInputError


@pytest.mark.parametrize("raw, expected", [("10", 10.0), ("12.50", 12.5), (0, 0.0)])
def test_parse_price_accepts_numbers(raw, expected):
    assert parse_price(raw) == expected


@pytest.mark.parametrize(
    "raw, message",
    [
        ("", "Price is required and must be a number."),
        (None, "Price is required and must be a number."),
        ("abc", "Price must be a valid number."),
        ("nan", "Price must be a valid number."),
        ("inf", "Price must be a valid number."),
        ("1e400", "Price must be a valid number."),
        ("-1", "Price cannot be negative."),
    ],
)
def test_parse_price_rejects_bad_input(raw, message):
    with pytest.raises(InvalidInputError) as exc_info:
        parse_price(raw)
    assert exc_info.value.message == message


def test_format_price_drops_trailing_zero():
    assert format_price(25.0) == "25"
    assert format_price(25.5) == "25.5"


def test_require_text_and_image():
    assert require_text("  Oils ", "x") == "Oils"
    with pytest.raises(InvalidInputError):
        require_text("   ", "Name is required.")
    with pytest.raises(InvalidInputError):
        require_image(ImageUpload("a.png", b""), "Image is required.")
