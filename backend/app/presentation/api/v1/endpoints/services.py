"""Workshop service catalogue endpoints."""

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from app.application.schemas import ServiceResponse
from app.application.services import ServiceCatalogService
from app.infrastructure.dependencies import get_service_catalog_service
from app.presentation.api.v1.endpoints.uploads import read_image

router = APIRouter(prefix="/services", tags=["Services"])


@router.get("", response_model=list[ServiceResponse])
async def list_services(
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> list[ServiceResponse]:
    services = await service.list_services()
    return [ServiceResponse.model_validate(s, from_attributes=True) for s in services]


@router.post("", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service(
    name: str = Form(""),
    price: str = Form(""),
    description: str = Form(""),
    image: UploadFile | None = File(None),
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> ServiceResponse:
    created = await service.create_service(name, await read_image(image), price, description)
    return ServiceResponse.model_validate(created, from_attributes=True)


@router.patch("/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: int,
    name: str = Form(""),
    price: str = Form(""),
    description: str = Form(""),
    image: UploadFile | None = File(None),
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> ServiceResponse:
    """Update a service; the stored image is kept unless a new one is uploaded."""
    updated = await service.update_service(
        service_id, name, price, description, image=await read_image(image)
    )
    return ServiceResponse.model_validate(updated, from_attributes=True)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(
    service_id: int,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> None:
    await service.delete_service(service_id)
