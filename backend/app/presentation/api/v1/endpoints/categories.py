"""Category CRUD endpoints and the per-category product list."""

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from app.application.schemas import CategoryResponse, ProductResponse
from app.application.services import CategoryService
from app.infrastructure.dependencies import get_category_service
from app.presentation.api.v1.endpoints.uploads import read_image

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    categories = await service.list_categories()
    return [CategoryResponse.model_validate(c, from_attributes=True) for c in categories]


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    name: str = Form(""),
    image: UploadFile | None = File(None),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Create a category from a name and an uploaded image."""
    category = await service.create_category(name, await read_image(image))
    return CategoryResponse.model_validate(category, from_attributes=True)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    category = await service.get_category(category_id)
    return CategoryResponse.model_validate(category, from_attributes=True)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> None:
    await service.delete_category(category_id)


@router.get("/{category_id}/products", response_model=list[ProductResponse])
async def list_category_products(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> list[ProductResponse]:
    """Products belonging to one category."""
    products = await service.list_products(category_id)
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.post(
    "/{category_id}/products",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_category_product(
    category_id: int,
    name: str = Form(""),
    price: str = Form(""),
    image: UploadFile | None = File(None),
    service: CategoryService = Depends(get_category_service),
) -> ProductResponse:
    product = await service.add_product(category_id, name, await read_image(image), price)
    return ProductResponse.model_validate(product, from_attributes=True)
