"""Order placement: turns a user's cart into an order.

The handler runs in a single unit of work. Any error raised here discards every
pending change, so an order is never stored without its stock decrement and
cleared cart, and stock is never taken without an order.
"""

from uuid import uuid4

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from pcstore.cart.cart_item import CartItem
from pcstore.cart.validation import validate_cart_line
from pcstore.domain import logger, store
from pcstore.order.order import Order
from pcstore.product.product import Product
from pcstore.shared.errors import OrderUnknown, OrderUserCartIsEmpty, OrderUserNotFound
from pcstore.user.user import User


@store.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    delivery_address = String(required=True, max_length=500)


@store.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        user = current_domain.repository_for(User).get_or_none(command.user_id)
        if user is None:
            raise OrderUserNotFound(command.user_id)

        cart_repo = current_domain.repository_for(CartItem)
        cart = cart_repo.get_by_user_id(user.id)
        if not cart:
            raise OrderUserCartIsEmpty(user.id)

        # Stock may have moved since the items were added
        unit_prices = {}
        for item in cart:
            product = validate_cart_line(item.product_id, item.quantity)
            unit_prices[str(product.id)] = product.price

        order_id = str(uuid4())
        try:
            order = Order.place(order_id, user.id, command.delivery_address, cart, unit_prices)
            current_domain.repository_for(Order).add(order)
        except ValidationError:
            raise
        except Exception as exc:
            raise OrderUnknown(order_id, exc) from exc

        current_domain.repository_for(Product).decrement_stock_for_items(cart)
        cart_repo.clear(cart)

        logger.info(
            "order_placed",
            order_id=order_id,
            user_id=str(user.id),
            line_count=len(cart),
            total=order.total,
        )
        return order
