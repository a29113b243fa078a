"""Promotional offer endpoints."""

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from app.application.schemas import OfferResponse
from app.application.services import OfferService
from app.infrastructure.dependencies import get_offer_service
from app.presentation.api.v1.endpoints.uploads import read_image

router = APIRouter(prefix="/offers", tags=["Offers"])


@router.get("", response_model=list[OfferResponse])
async def list_offers(
    service: OfferService = Depends(get_offer_service),
) -> list[OfferResponse]:
    offers = await service.list_offers()
    return [OfferResponse.model_validate(o, from_attributes=True) for o in offers]


@router.post("", response_model=OfferResponse, status_code=status.HTTP_201_CREATED)
async def create_offer(
    title: str = Form(""),
    image: UploadFile | None = File(None),
    service: OfferService = Depends(get_offer_service),
) -> OfferResponse:
    offer = await service.create_offer(title, await read_image(image))
    return OfferResponse.model_validate(offer, from_attributes=True)


@router.delete("/{offer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_offer(
    offer_id: int,
    service: OfferService = Depends(get_offer_service),
) -> None:
    await service.delete_offer(offer_id)
