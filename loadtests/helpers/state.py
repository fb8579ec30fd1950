"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state. State tracks entity IDs
returned by creation endpoints so follow-up requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class CatalogueState:
    category_id: str | None = None
    manufacturer_id: str | None = None
    product_ids: list[str] = field(default_factory=list)


@dataclass
class ShopperState:
    user_id: str | None = None
    access_token: str | None = None
    refresh_token: str | None = None
    cart_item_ids: list[str] = field(default_factory=list)
    order_id: str | None = None
