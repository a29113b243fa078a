"""Input checks carried over from the dashboard forms."""

import math
from typing import Any

from app.domain.entities import ImageUpload
from app.domain.exceptions import InvalidInputError


def require_text(value: str | None, message: str) -> str:
    text = (value or "").strip()
    if not text:
        raise InvalidInputError(message)
    return text


def require_image(image: ImageUpload | None, message: str) -> ImageUpload:
    if image is None or image.is_empty:
        raise InvalidInputError(message)
    return image


def parse_price(raw: Any) -> float:
    """Parse a price field the way the forms do: numeric, and not negative."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise InvalidInputError("Price is required and must be a number.")
    try:
        price = float(raw)
    except (TypeError, ValueError):
        raise InvalidInputError("Price must be a valid number.")
    if not math.isfinite(price):
        raise InvalidInputError("Price must be a valid number.")
    if price < 0:
        raise InvalidInputError("Price cannot be negative.")
    return price


def format_price(price: float) -> str:
    """Render a price for a form field without a trailing ``.0``."""
    return str(int(price)) if float(price).is_integer() else str(price)
