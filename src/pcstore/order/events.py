"""Domain events for orders."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from pcstore.domain import store


@store.event(part_of="Order")
class OrderPlaced:
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    delivery_address = String(required=True, max_length=500)
    line_count = Integer(required=True)
    total = Float(required=True)
    placed_at = DateTime(required=True)
