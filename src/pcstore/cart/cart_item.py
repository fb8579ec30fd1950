"""CartItem aggregate: one (user, product, quantity) line of a shopping cart.

A user's cart is the set of their unfinished lines. Placing an order finishes
every line, which empties the cart while keeping the rows for history.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer

from pcstore.cart.events import CartItemAdded, CartItemQuantityChanged
from pcstore.domain import store


@store.aggregate
class CartItem:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    is_finished = Boolean(default=False)
    added_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, user_id, product_id, quantity):
        now = datetime.now(UTC)
        item = cls(
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            is_finished=False,
            added_at=now,
            updated_at=now,
        )
        item.raise_(
            CartItemAdded(
                cart_item_id=str(item.id),
                user_id=str(user_id),
                product_id=str(product_id),
                quantity=quantity,
            )
        )
        return item

    def change_quantity(self, new_quantity):
        if self.is_finished:
            raise ValidationError({"cart_item": ["A finished cart item cannot be changed"]})

        previous_quantity = self.quantity
        self.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemQuantityChanged(
                cart_item_id=str(self.id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def finish(self):
        """Mark the line as converted into an order."""
        self.is_finished = True
        self.updated_at = datetime.now(UTC)


@store.repository(part_of=CartItem)
class CartItemRepository:
    def get_or_none(self, cart_item_id) -> CartItem | None:
        try:
            return self.get(cart_item_id)
        except ObjectNotFoundError:
            return None

    def get_in_cart(self, cart_item_id) -> CartItem | None:
        """A line that is still in a cart. Finished lines belong to an order."""
        item = self.get_or_none(cart_item_id)
        if item is None or item.is_finished:
            return None
        return item

    def get_by_user_id(self, user_id) -> list[CartItem]:
        """The user's current cart: every line not yet turned into an order."""
        return self._dao.query.filter(user_id=str(user_id), is_finished=False).order_by("added_at").all().items

    def find_line(self, user_id, product_id) -> CartItem | None:
        lines = [line for line in self.get_by_user_id(user_id) if str(line.product_id) == str(product_id)]
        return lines[0] if lines else None

    def list_all(self) -> list[CartItem]:
        return self._dao.query.order_by("added_at").all().items

    def clear(self, items):
        for item in items:
            item.finish()
            self.add(item)
