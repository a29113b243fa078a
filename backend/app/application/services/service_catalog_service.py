"""Application service (use case) for the bookable workshop services."""

import logging

from app.application.interfaces import AdminApi
from app.application.services.envelope import delete_object, records, unwrap_object
from app.application.services.validation import (
    format_price,
    parse_price,
    require_image,
    require_text,
)
from app.domain.entities import ImageUpload, Service
from app.domain.exceptions import EntityNotFoundError, UpstreamApiError

logger = logging.getLogger(__name__)


class ServiceCatalogService:
    """Orchestrates CRUD for ``Service`` records (oil change, inspection, ...)."""

    def __init__(self, api: AdminApi):
        self._api = api

    async def list_services(self) -> list[Service]:
        payload = await self._api.request("GET", "/api/services")
        return [Service.from_api(raw) for raw in records(payload, "services")]

    async def create_service(
        self,
        name: str,
        image: ImageUpload | None,
        price: str | float | None,
        description: str,
    ) -> Service:
        message = "Please fill in all fields and select an image."
        name = require_text(name, message)
        description = require_text(description, message)
        image = require_image(image, message)
        parsed_price = parse_price(price)

        payload = await self._api.request(
            "POST",
            "/api/services",
            data={
                "name": name,
                "price": format_price(parsed_price),
                "description": description,
            },
            files={"image": image.as_multipart()},
        )
        service = Service.from_api(unwrap_object(payload, "service"))
        logger.info("Created service %r (id=%s)", service.name, service.id)
        return service

    async def update_service(
        self,
        service_id: int | str,
        name: str,
        price: str | float | None,
        description: str,
        image: ImageUpload | None = None,
    ) -> Service:
        """PATCH a service; the image is only sent when a new one is given."""
        message = "Please fill in all fields."
        name = require_text(name, message)
        description = require_text(description, message)
        parsed_price = parse_price(price)

        files = None
        if image is not None and not image.is_empty:
            files = {"image": image.as_multipart()}

        try:
            payload = await self._api.request(
                "PATCH",
                f"/api/services/{service_id}",
                data={
                    "name": name,
                    "price": format_price(parsed_price),
                    "description": description,
                },
                files=files,
            )
        except UpstreamApiError as e:
            if e.status_code == 404:
                raise EntityNotFoundError("Service", service_id) from e
            raise
        service = Service.from_api(unwrap_object(payload, "service"))
        logger.info("Updated service %s", service_id)
        return service

    async def delete_service(self, service_id: int | str) -> None:
        await delete_object(self._api, f"/api/services/{service_id}", "Service", service_id)
        logger.info("Deleted service %s", service_id)
