"""Order aggregate: an immutable snapshot of a user's cart at checkout.

An order is only ever created by placement (see ``placement.py``). Every line
records the cart item it came from and the product price at the moment of
placement, so later catalogue changes never alter a placed order.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from pcstore.domain import store
from pcstore.order.events import OrderPlaced


class OrderStatus(Enum):
    PROCESSING = "Processing"


@store.entity(part_of="Order")
class OrderLine:
    cart_item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def total(self):
        return round(self.unit_price * self.quantity, 2)


@store.aggregate
class Order:
    user_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PROCESSING.value)
    delivery_address = String(required=True, max_length=500)
    lines = HasMany(OrderLine)
    created_at = DateTime()

    @invariant.post
    def order_must_have_lines(self):
        if not self.lines:
            raise ValidationError({"lines": ["An order must contain at least one line"]})

    @invariant.post
    def delivery_address_must_not_be_blank(self):
        if not self.delivery_address or not self.delivery_address.strip():
            raise ValidationError({"delivery_address": ["Delivery address cannot be blank"]})

    @classmethod
    def place(cls, order_id, user_id, delivery_address, cart_items, unit_prices):
        """Build an order from ``cart_items``.

        ``unit_prices`` maps product id to the price charged for each unit.
        """
        lines = [
            OrderLine(
                cart_item_id=item.id,
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=unit_prices[str(item.product_id)],
            )
            for item in cart_items
        ]
        order = cls(
            id=order_id,
            user_id=user_id,
            status=OrderStatus.PROCESSING.value,
            delivery_address=delivery_address,
            lines=lines,
            created_at=datetime.now(UTC),
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                delivery_address=delivery_address,
                line_count=len(lines),
                total=order.total,
                placed_at=order.created_at,
            )
        )
        return order

    @property
    def total(self):
        return round(sum(line.total for line in self.lines), 2)


@store.repository(part_of=Order)
class OrderRepository:
    def get_or_none(self, order_id) -> Order | None:
        try:
            return self.get(order_id)
        except ObjectNotFoundError:
            return None

    def find_by_user(self, user_id) -> list[Order]:
        return self._dao.query.filter(user_id=str(user_id)).order_by("-created_at").all().items

    def list_all(self) -> list[Order]:
        return self._dao.query.order_by("-created_at").all().items
