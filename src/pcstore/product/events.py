"""Domain events for the Product aggregate."""

from protean.fields import Float, Identifier, Integer, String

from pcstore.domain import store


@store.event(part_of="Product")
class ProductCreated:
    """A new component was listed in the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    stock_quantity: Integer(required=True)
    category_id: Identifier(required=True)
    manufacturer_id: Identifier(required=True)


@store.event(part_of="Product")
class ProductDetailsUpdated:
    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)


@store.event(part_of="Product")
class StockQuantityChanged:
    """Available stock of a product changed, by order placement or by hand."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_quantity: Integer(required=True)
    new_quantity: Integer(required=True)
    reason: String(required=True)


@store.event(part_of="Product")
class ProductImageAdded:
    __version__ = 1

    product_id: Identifier(required=True)
    image_id: Identifier(required=True)
    url: String(required=True)


@store.event(part_of="Product")
class ProductImageRemoved:
    __version__ = 1

    product_id: Identifier(required=True)
    image_id: Identifier(required=True)
