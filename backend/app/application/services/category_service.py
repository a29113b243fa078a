"""Application service (use case) for product categories."""

import logging

from app.application.interfaces import AdminApi
from app.application.services.envelope import (
    delete_object,
    fetch_object,
    records,
    unwrap_object,
)
from app.application.services.product_service import ProductService
from app.application.services.validation import require_image, require_text
from app.domain.entities import Category, ImageUpload, Product

logger = logging.getLogger(__name__)


class CategoryService:
    """Orchestrates category CRUD and the per-category product list."""

    def __init__(self, api: AdminApi):
        self._api = api

    async def list_categories(self) -> list[Category]:
        payload = await self._api.request("GET", "/api/categories")
        return [Category.from_api(raw) for raw in records(payload, "categories")]

    async def get_category(self, category_id: int | str) -> Category:
        raw = await fetch_object(
            self._api, f"/api/categories/{category_id}", "Category", category_id
        )
        return Category.from_api(raw)

    async def create_category(self, name: str, image: ImageUpload | None) -> Category:
        message = "Please provide both name and an image."
        name = require_text(name, message)
        image = require_image(image, message)

        payload = await self._api.request(
            "POST",
            "/api/categories",
            data={"name": name},
            files={"image": image.as_multipart()},
        )
        category = Category.from_api(unwrap_object(payload, "category"))
        logger.info("Created category %r (id=%s)", category.name, category.id)
        return category

    async def delete_category(self, category_id: int | str) -> None:
        await delete_object(
            self._api, f"/api/categories/{category_id}", "Category", category_id
        )
        logger.info("Deleted category %s", category_id)

    async def list_products(self, category_id: int | str) -> list[Product]:
        """Products of one category.

        The API's ``categoryId`` filter is not trusted on its own; products
        whose category does not match the requested id are dropped.
        """
        payload = await self._api.request(
            "GET", "/api/products", params={"categoryId": str(category_id)}
        )
        products = [Product.from_api(raw) for raw in records(payload, "products")]
        return [
            p for p in products
            if p.category is not None and str(p.category.id) == str(category_id)
        ]

    async def add_product(
        self,
        category_id: int | str,
        name: str,
        image: ImageUpload | None,
        price: str | float | None,
    ) -> Product:
        """Create a product linked to this category."""
        return await ProductService(self._api).create_product(
            name, image, price, category_id=category_id
        )
