"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class AddCartItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "product_id": "d4e5f6a7-b8c9-0123-defa-234567890123",
                    "quantity": 2,
                }
            ]
        }
    }

    user_id: str
    product_id: str
    quantity: int


class UpdateCartItemQuantityRequest(BaseModel):
    quantity: int


class CartItemResponse(BaseModel):
    id: str
    user_id: str
    product_id: str
    quantity: int
    is_finished: bool = False

    @classmethod
    def from_aggregate(cls, item) -> CartItemResponse:
        return cls(
            id=str(item.id),
            user_id=str(item.user_id),
            product_id=str(item.product_id),
            quantity=item.quantity,
            is_finished=bool(item.is_finished),
        )


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "delivery_address": "12 Baker Street, London",
                }
            ]
        }
    }

    user_id: str
    delivery_address: str = Field(..., min_length=1, max_length=500)


class OrderLineResponse(BaseModel):
    id: str
    cart_item_id: str
    product_id: str
    quantity: int
    unit_price: float


class OrderResponse(BaseModel):
    id: str
    user_id: str
    status: str
    delivery_address: str
    lines: list[OrderLineResponse] = []
    total: float
    created_at: datetime | None = None

    @classmethod
    def from_aggregate(cls, order) -> OrderResponse:
        return cls(
            id=str(order.id),
            user_id=str(order.user_id),
            status=order.status,
            delivery_address=order.delivery_address,
            lines=[
                OrderLineResponse(
                    id=str(line.id),
                    cart_item_id=str(line.cart_item_id),
                    product_id=str(line.product_id),
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                )
                for line in order.lines
            ],
            total=order.total,
            created_at=order.created_at,
        )
