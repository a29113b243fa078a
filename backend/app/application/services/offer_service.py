"""Application service (use case) for promotional offers."""

import logging

from app.application.interfaces import AdminApi
from app.application.services.envelope import delete_object, records, unwrap_object
from app.application.services.validation import require_image, require_text
from app.domain.entities import ImageUpload, Offer

logger = logging.getLogger(__name__)


class OfferService:

    def __init__(self, api: AdminApi):
        self._api = api

    async def list_offers(self) -> list[Offer]:
        payload = await self._api.request("GET", "/api/offers")
        return [Offer.from_api(raw) for raw in records(payload, "offers")]

    async def create_offer(self, title: str, image: ImageUpload | None) -> Offer:
        message = "Please provide both title and an image."
        title = require_text(title, message)
        image = require_image(image, message)

        payload = await self._api.request(
            "POST",
            "/api/offers",
            data={"title": title},
            files={"image": image.as_multipart()},
        )
        offer = Offer.from_api(unwrap_object(payload, "offer"))
        logger.info("Created offer %r (id=%s)", offer.title, offer.id)
        return offer

    async def delete_offer(self, offer_id: int | str) -> None:
        await delete_object(self._api, f"/api/offers/{offer_id}", "Offer", offer_id)
        logger.info("Deleted offer %s", offer_id)
