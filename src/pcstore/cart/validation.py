"""Stock validation for cart lines."""

from protean.utils.globals import current_domain

from pcstore.product.product import Product
from pcstore.shared.errors import ProductNotFound


def validate_cart_line(product_id, quantity) -> Product:
    """Return the product when ``quantity`` units of it can be bought right now.

    Raises ``ProductNotFound`` or ``QuantityExceedsStock``.
    """
    product = current_domain.repository_for(Product).get_or_none(product_id)
    if product is None:
        raise ProductNotFound(product_id)

    product.ensure_stock_for(quantity)
    return product
