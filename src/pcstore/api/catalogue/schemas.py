"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Category / Manufacturer ---


class CategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"name": "Graphics Cards", "description": "Discrete GPUs"}]}
    }

    name: str = Field(..., max_length=100)
    description: str | None = None


class UpdateCategoryRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    description: str | None = None


class CategoryResponse(BaseModel):
    id: str
    name: str
    description: str | None = None

    @classmethod
    def from_aggregate(cls, category) -> CategoryResponse:
        return cls(id=str(category.id), name=category.name, description=category.description)


class ManufacturerRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "ASUS"}]}}

    name: str = Field(..., max_length=100)


class ManufacturerResponse(BaseModel):
    id: str
    name: str

    @classmethod
    def from_aggregate(cls, manufacturer) -> ManufacturerResponse:
        return cls(id=str(manufacturer.id), name=manufacturer.name)


# --- Product ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "GeForce RTX 4070",
                    "price": 599.0,
                    "stock_quantity": 12,
                    "description": "12GB GDDR6X graphics card",
                    "component_characteristic": "memory=12GB,bus=192bit",
                    "category_id": "c3d4e5f6-a7b8-9012-cdef-123456789012",
                    "manufacturer_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    price: float = Field(..., gt=0)
    stock_quantity: int = Field(0, ge=0)
    description: str | None = None
    component_characteristic: str | None = None
    category_id: str
    manufacturer_id: str


class UpdateProductRequest(BaseModel):
    name: str | None = Field(None, max_length=255)
    price: float | None = Field(None, gt=0)
    description: str | None = None
    component_characteristic: str | None = None
    category_id: str | None = None
    manufacturer_id: str | None = None


class UpdateStockQuantityRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"stock_quantity": 25}]}}

    stock_quantity: int = Field(..., ge=0)


class AddProductImageRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"url": "https://cdn.example.com/rtx4070-front.jpg"}]}}

    url: str = Field(..., max_length=500)


class ProductImageResponse(BaseModel):
    id: str
    url: str
    display_order: int


class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    stock_quantity: int
    description: str | None = None
    component_characteristic: str | None = None
    category_id: str
    manufacturer_id: str
    images: list[ProductImageResponse] = []

    @classmethod
    def from_aggregate(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            price=product.price,
            stock_quantity=product.stock_quantity,
            description=product.description,
            component_characteristic=product.component_characteristic,
            category_id=str(product.category_id),
            manufacturer_id=str(product.manufacturer_id),
            images=[
                ProductImageResponse(id=str(image.id), url=image.url, display_order=image.display_order)
                for image in sorted(product.images, key=lambda i: i.display_order)
            ],
        )


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
