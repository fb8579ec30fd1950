"""Domain events for cart items."""

from protean.fields import Identifier, Integer

from pcstore.domain import store


@store.event(part_of="CartItem")
class CartItemAdded:
    __version__ = 1

    cart_item_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@store.event(part_of="CartItem")
class CartItemQuantityChanged:
    __version__ = 1

    cart_item_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
