"""Product endpoints: listing with search/filter/sort, create, delete."""

from typing import Literal

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from app.application.schemas import ProductResponse
from app.application.services import ProductService
from app.infrastructure.dependencies import get_product_service
from app.presentation.api.v1.endpoints.uploads import read_image

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(
    search: str | None = None,
    category: str | None = None,
    sort_by: Literal["name", "price", "date"] = "name",
    order: Literal["asc", "desc"] = "asc",
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """List products, filtered by name and category name, then sorted.

    ``category=all`` disables the category filter.
    """
    products = await service.list_products(
        search=search, category=category, sort_by=sort_by, order=order
    )
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.get("/categories", response_model=list[str])
async def list_product_categories(
    service: ProductService = Depends(get_product_service),
) -> list[str]:
    """Distinct category names for the filter dropdown."""
    return await service.category_names()


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    name: str = Form(""),
    price: str = Form(""),
    category_id: int | None = Form(None),
    image: UploadFile | None = File(None),
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    product = await service.create_product(
        name, await read_image(image), price, category_id=category_id
    )
    return ProductResponse.model_validate(product, from_attributes=True)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> None:
    await service.delete_product(product_id)
