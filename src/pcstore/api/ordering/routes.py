"""FastAPI endpoints for cart items and orders."""

from fastapi import APIRouter

from pcstore.api.ordering import queries
from pcstore.api.ordering.schemas import (
    AddCartItemRequest,
    CartItemResponse,
    OrderResponse,
    PlaceOrderRequest,
    UpdateCartItemQuantityRequest,
)
from pcstore.cart.items import AddCartItem, RemoveCartItem, UpdateCartItemQuantity
from pcstore.order.placement import PlaceOrder
from pcstore.shared.errors import CartItemNotFound, OrderNotFound
from pcstore.shared.http import http_error, raise_for_error
from pcstore.shared.result import dispatch

cart_item_router = APIRouter(prefix="/cart-items", tags=["cart-items"])
order_router = APIRouter(prefix="/orders", tags=["orders"])


# --- Cart item endpoints ---


@cart_item_router.get("", response_model=list[CartItemResponse])
async def list_cart_items() -> list[CartItemResponse]:
    return [CartItemResponse.from_aggregate(i) for i in queries.list_cart_items()]


@cart_item_router.get("/user/{user_id}", response_model=list[CartItemResponse])
async def get_cart_of_user(user_id: str) -> list[CartItemResponse]:
    return [CartItemResponse.from_aggregate(i) for i in queries.cart_of_user(user_id)]


@cart_item_router.get("/{cart_item_id}", response_model=CartItemResponse)
async def get_cart_item(cart_item_id: str) -> CartItemResponse:
    item = queries.find_cart_item(cart_item_id)
    if item is None:
        raise http_error(CartItemNotFound(cart_item_id))
    return CartItemResponse.from_aggregate(item)


@cart_item_router.post("", status_code=201, response_model=CartItemResponse)
async def add_cart_item(body: AddCartItemRequest) -> CartItemResponse:
    result = dispatch(AddCartItem, user_id=body.user_id, product_id=body.product_id, quantity=body.quantity)
    return CartItemResponse.from_aggregate(raise_for_error(result))


@cart_item_router.put("/{cart_item_id}", response_model=CartItemResponse)
async def update_cart_item_quantity(cart_item_id: str, body: UpdateCartItemQuantityRequest) -> CartItemResponse:
    result = dispatch(UpdateCartItemQuantity, cart_item_id=cart_item_id, quantity=body.quantity)
    return CartItemResponse.from_aggregate(raise_for_error(result))


@cart_item_router.delete("/{cart_item_id}", response_model=CartItemResponse)
async def remove_cart_item(cart_item_id: str) -> CartItemResponse:
    result = dispatch(RemoveCartItem, cart_item_id=cart_item_id)
    return CartItemResponse.from_aggregate(raise_for_error(result))


# --- Order endpoints ---


@order_router.get("", response_model=list[OrderResponse])
async def list_orders() -> list[OrderResponse]:
    return [OrderResponse.from_aggregate(o) for o in queries.list_orders()]


@order_router.get("/user/{user_id}", response_model=list[OrderResponse])
async def get_orders_of_user(user_id: str) -> list[OrderResponse]:
    return [OrderResponse.from_aggregate(o) for o in queries.orders_of_user(user_id)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    order = queries.find_order(order_id)
    if order is None:
        raise http_error(OrderNotFound(order_id))
    return OrderResponse.from_aggregate(order)


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest) -> OrderResponse:
    result = dispatch(PlaceOrder, user_id=body.user_id, delivery_address=body.delivery_address)
    return OrderResponse.from_aggregate(raise_for_error(result))
