"""Application service (use case) for shop products."""

import logging
from datetime import datetime, timezone
from typing import Literal

from app.application.interfaces import AdminApi
from app.application.services.envelope import records, unwrap_object
from app.application.services.validation import (
    format_price,
    parse_price,
    require_image,
    require_text,
)
from app.domain.entities import ImageUpload, Product
from app.domain.exceptions import EntityNotFoundError, UpstreamApiError

logger = logging.getLogger(__name__)

ProductSortKey = Literal["name", "price", "date"]
SortOrder = Literal["asc", "desc"]

ALL_CATEGORIES = "all"

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _sort_key(sort_by: ProductSortKey):
    if sort_by == "price":
        return lambda p: p.price
    if sort_by == "date":
        return lambda p: p.created_at or _EPOCH
    return lambda p: p.name.lower()


def filter_products(
    products: list[Product],
    *,
    search: str | None = None,
    category: str | None = None,
    sort_by: ProductSortKey = "name",
    order: SortOrder = "asc",
) -> list[Product]:
    """Apply the product page's search box, category dropdown and sort controls."""
    needle = (search or "").lower()
    selected = products
    if needle:
        selected = [p for p in selected if needle in p.name.lower()]
    if category and category != ALL_CATEGORIES:
        selected = [p for p in selected if p.category_name == category]
    return sorted(selected, key=_sort_key(sort_by), reverse=order == "desc")


class ProductService:
    """Orchestrates product listing, creation and deletion."""

    def __init__(self, api: AdminApi):
        self._api = api

    async def _fetch_all(self) -> list[Product]:
        payload = await self._api.request("GET", "/api/products")
        return [Product.from_api(raw) for raw in records(payload, "products")]

    async def list_products(
        self,
        *,
        search: str | None = None,
        category: str | None = None,
        sort_by: ProductSortKey = "name",
        order: SortOrder = "asc",
    ) -> list[Product]:
        products = await self._fetch_all()
        return filter_products(
            products, search=search, category=category, sort_by=sort_by, order=order
        )

    async def category_names(self) -> list[str]:
        """Distinct category names, in order of first appearance."""
        names: list[str] = []
        for product in await self._fetch_all():
            name = product.category_name
            if name and name not in names:
                names.append(name)
        return names

    async def create_product(
        self,
        name: str,
        image: ImageUpload | None,
        price: str | float | None,
        category_id: int | str | None = None,
    ) -> Product:
        name = require_text(name, "Product name is required.")
        image = require_image(image, "Product image is required.")
        parsed_price = parse_price(price)

        data = {"name": name, "price": format_price(parsed_price)}
        if category_id is not None:
            data["categoryId"] = str(category_id)

        payload = await self._api.request(
            "POST",
            "/api/products",
            data=data,
            files={"image": image.as_multipart()},
        )
        product = Product.from_api(unwrap_object(payload, "product"))
        logger.info("Created product %r (id=%s)", product.name, product.id)
        return product

    async def delete_product(self, product_id: int | str) -> None:
        """Delete a product.

        ``DELETE /api/products/:id`` is tried first. Only when it fails with
        HTTP 500, two alternative shapes the API has accepted are tried in
        turn: ``DELETE /api/products`` and ``POST /api/products/delete``,
        both with ``{id}`` in the body. If none succeeds the first error is
        raised.
        """
        try:
            await self._api.request("DELETE", f"/api/products/{product_id}")
            logger.info("Deleted product %s", product_id)
            return
        except UpstreamApiError as first_error:
            if first_error.status_code == 404:
                raise EntityNotFoundError("Product", product_id) from first_error
            if first_error.status_code != 500:
                raise
            error = first_error

        for method, path in (
            ("DELETE", "/api/products"),
            ("POST", "/api/products/delete"),
        ):
            try:
                await self._api.request(method, path, json={"id": product_id})
            except UpstreamApiError as alt_error:
                logger.warning(
                    "Fallback %s %s for product %s failed: %s",
                    method, path, product_id, alt_error,
                )
                continue
            logger.info("Deleted product %s via %s %s", product_id, method, path)
            return

        raise error
