"""FastAPI endpoints for the Catalogue."""

from fastapi import APIRouter, Query

from pcstore.api.catalogue import queries
from pcstore.api.catalogue.schemas import (
    AddProductImageRequest,
    CategoryRequest,
    CategoryResponse,
    CreateProductRequest,
    ManufacturerRequest,
    ManufacturerResponse,
    ProductResponse,
    UpdateCategoryRequest,
    UpdateProductRequest,
    UpdateStockQuantityRequest,
)
from pcstore.category.management import CreateCategory, DeleteCategory, UpdateCategory
from pcstore.manufacturer.management import (
    CreateManufacturer,
    DeleteManufacturer,
    RenameManufacturer,
)
from pcstore.product.images import AddProductImage, RemoveProductImage
from pcstore.product.management import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
    UpdateStockQuantity,
)
from pcstore.shared.errors import CategoryNotFound, ManufacturerNotFound, ProductNotFound
from pcstore.shared.http import http_error, raise_for_error
from pcstore.shared.result import dispatch

category_router = APIRouter(prefix="/categories", tags=["categories"])
manufacturer_router = APIRouter(prefix="/manufacturers", tags=["manufacturers"])
product_router = APIRouter(prefix="/products", tags=["products"])


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    return [CategoryResponse.from_aggregate(c) for c in queries.list_categories()]


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str) -> CategoryResponse:
    category = queries.find_category(category_id)
    if category is None:
        raise http_error(CategoryNotFound(category_id))
    return CategoryResponse.from_aggregate(category)


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(body: CategoryRequest) -> CategoryResponse:
    result = dispatch(CreateCategory, name=body.name, description=body.description)
    return CategoryResponse.from_aggregate(raise_for_error(result))


@category_router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(category_id: str, body: UpdateCategoryRequest) -> CategoryResponse:
    result = dispatch(UpdateCategory, category_id=category_id, name=body.name, description=body.description)
    return CategoryResponse.from_aggregate(raise_for_error(result))


@category_router.delete("/{category_id}", response_model=CategoryResponse)
async def delete_category(category_id: str) -> CategoryResponse:
    result = dispatch(DeleteCategory, category_id=category_id)
    return CategoryResponse.from_aggregate(raise_for_error(result))


# --- Manufacturer endpoints ---


@manufacturer_router.get("", response_model=list[ManufacturerResponse])
async def list_manufacturers() -> list[ManufacturerResponse]:
    return [ManufacturerResponse.from_aggregate(m) for m in queries.list_manufacturers()]


@manufacturer_router.get("/{manufacturer_id}", response_model=ManufacturerResponse)
async def get_manufacturer(manufacturer_id: str) -> ManufacturerResponse:
    manufacturer = queries.find_manufacturer(manufacturer_id)
    if manufacturer is None:
        raise http_error(ManufacturerNotFound(manufacturer_id))
    return ManufacturerResponse.from_aggregate(manufacturer)


@manufacturer_router.post("", status_code=201, response_model=ManufacturerResponse)
async def create_manufacturer(body: ManufacturerRequest) -> ManufacturerResponse:
    result = dispatch(CreateManufacturer, name=body.name)
    return ManufacturerResponse.from_aggregate(raise_for_error(result))


@manufacturer_router.put("/{manufacturer_id}", response_model=ManufacturerResponse)
async def rename_manufacturer(manufacturer_id: str, body: ManufacturerRequest) -> ManufacturerResponse:
    result = dispatch(RenameManufacturer, manufacturer_id=manufacturer_id, name=body.name)
    return ManufacturerResponse.from_aggregate(raise_for_error(result))


@manufacturer_router.delete("/{manufacturer_id}", response_model=ManufacturerResponse)
async def delete_manufacturer(manufacturer_id: str) -> ManufacturerResponse:
    result = dispatch(DeleteManufacturer, manufacturer_id=manufacturer_id)
    return ManufacturerResponse.from_aggregate(raise_for_error(result))


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    return [ProductResponse.from_aggregate(p) for p in queries.list_products()]


@product_router.get("/filter", response_model=list[ProductResponse])
async def filter_products(
    category_id: str | None = None,
    manufacturer_ids: list[str] | None = Query(None),
    name: str | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    min_stock_quantity: int | None = None,
    max_stock_quantity: int | None = None,
) -> list[ProductResponse]:
    products = queries.filter_products(
        category_id=category_id,
        manufacturer_ids=manufacturer_ids,
        name=name,
        min_price=min_price,
        max_price=max_price,
        min_stock_quantity=min_stock_quantity,
        max_stock_quantity=max_stock_quantity,
    )
    return [ProductResponse.from_aggregate(p) for p in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = queries.find_product(product_id)
    if product is None:
        raise http_error(ProductNotFound(product_id))
    return ProductResponse.from_aggregate(product)


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest) -> ProductResponse:
    result = dispatch(
        CreateProduct,
        name=body.name,
        price=body.price,
        stock_quantity=body.stock_quantity,
        description=body.description,
        component_characteristic=body.component_characteristic,
        category_id=body.category_id,
        manufacturer_id=body.manufacturer_id,
    )
    return ProductResponse.from_aggregate(raise_for_error(result))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    result = dispatch(
        UpdateProduct,
        product_id=product_id,
        name=body.name,
        price=body.price,
        description=body.description,
        component_characteristic=body.component_characteristic,
        category_id=body.category_id,
        manufacturer_id=body.manufacturer_id,
    )
    return ProductResponse.from_aggregate(raise_for_error(result))


@product_router.put("/{product_id}/stock", response_model=ProductResponse)
async def update_stock_quantity(product_id: str, body: UpdateStockQuantityRequest) -> ProductResponse:
    result = dispatch(UpdateStockQuantity, product_id=product_id, stock_quantity=body.stock_quantity)
    return ProductResponse.from_aggregate(raise_for_error(result))


@product_router.delete("/{product_id}", response_model=ProductResponse)
async def delete_product(product_id: str) -> ProductResponse:
    result = dispatch(DeleteProduct, product_id=product_id)
    return ProductResponse.from_aggregate(raise_for_error(result))


@product_router.post("/{product_id}/images", status_code=201, response_model=ProductResponse)
async def add_product_image(product_id: str, body: AddProductImageRequest) -> ProductResponse:
    result = dispatch(AddProductImage, product_id=product_id, url=body.url)
    return ProductResponse.from_aggregate(raise_for_error(result))


@product_router.delete("/{product_id}/images/{image_id}", response_model=ProductResponse)
async def remove_product_image(product_id: str, image_id: str) -> ProductResponse:
    result = dispatch(RemoveProductImage, product_id=product_id, image_id=image_id)
    return ProductResponse.from_aggregate(raise_for_error(result))
