"""Cart item commands: add, change quantity, remove."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from pcstore.cart.cart_item import CartItem
from pcstore.cart.validation import validate_cart_line
from pcstore.domain import logger, store
from pcstore.shared.errors import CartItemNotFound, UserNotFound
from pcstore.user.user import User


@store.command(part_of="CartItem")
class AddCartItem:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@store.command(part_of="CartItem")
class UpdateCartItemQuantity:
    cart_item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@store.command(part_of="CartItem")
class RemoveCartItem:
    cart_item_id = Identifier(required=True)


def get_cart_item(cart_item_id) -> CartItem:
    item = current_domain.repository_for(CartItem).get_in_cart(cart_item_id)
    if item is None:
        raise CartItemNotFound(cart_item_id)
    return item


@store.command_handler(part_of=CartItem)
class CartItemsHandler:
    @handle(AddCartItem)
    def add_cart_item(self, command):
        if current_domain.repository_for(User).get_or_none(command.user_id) is None:
            raise UserNotFound(command.user_id)

        repo = current_domain.repository_for(CartItem)
        existing = repo.find_line(command.user_id, command.product_id)

        if existing is not None:
            # Adding a product already in the cart tops up the existing line
            total = existing.quantity + command.quantity
            validate_cart_line(command.product_id, total)
            existing.change_quantity(total)
            repo.add(existing)
            return existing

        validate_cart_line(command.product_id, command.quantity)
        item = CartItem.create(
            user_id=command.user_id,
            product_id=command.product_id,
            quantity=command.quantity,
        )
        repo.add(item)
        logger.info(
            "cart_item_added",
            cart_item_id=str(item.id),
            user_id=str(command.user_id),
            product_id=str(command.product_id),
        )
        return item

    @handle(UpdateCartItemQuantity)
    def update_cart_item_quantity(self, command):
        item = get_cart_item(command.cart_item_id)
        validate_cart_line(item.product_id, command.quantity)

        item.change_quantity(command.quantity)
        current_domain.repository_for(CartItem).add(item)
        return item

    @handle(RemoveCartItem)
    def remove_cart_item(self, command):
        item = get_cart_item(command.cart_item_id)
        current_domain.repository_for(CartItem)._dao.delete(item)
        return item
