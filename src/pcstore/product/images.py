"""Product images: commands and handler.

Only image references (urls) are recorded; the files live elsewhere.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from pcstore.domain import store
from pcstore.product.management import get_product
from pcstore.product.product import Product


@store.command(part_of="Product")
class AddProductImage:
    product_id: Identifier(required=True)
    url: String(required=True, max_length=500)


@store.command(part_of="Product")
class RemoveProductImage:
    product_id: Identifier(required=True)
    image_id: Identifier(required=True)


@store.command_handler(part_of=Product)
class ProductImagesHandler:
    @handle(AddProductImage)
    def add_product_image(self, command):
        product = get_product(command.product_id)
        product.add_image(command.url)
        current_domain.repository_for(Product).add(product)
        return product

    @handle(RemoveProductImage)
    def remove_product_image(self, command):
        product = get_product(command.product_id)
        product.remove_image(command.image_id)
        current_domain.repository_for(Product).add(product)
        return product
