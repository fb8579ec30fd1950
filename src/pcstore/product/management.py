"""Product management: commands and handlers."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from pcstore.category.management import get_category
from pcstore.domain import logger, store
from pcstore.manufacturer.management import get_manufacturer
from pcstore.product.product import Product
from pcstore.shared.errors import ProductNotFound


@store.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.01)
    stock_quantity: Integer(default=0, min_value=0)
    description: Text()
    component_characteristic: Text()
    category_id: Identifier(required=True)
    manufacturer_id: Identifier(required=True)


@store.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    price: Float(min_value=0.01)
    description: Text()
    component_characteristic: Text()
    category_id: Identifier()
    manufacturer_id: Identifier()


@store.command(part_of="Product")
class UpdateStockQuantity:
    product_id: Identifier(required=True)
    stock_quantity: Integer(required=True, min_value=0)


@store.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


def get_product(product_id) -> Product:
    product = current_domain.repository_for(Product).get_or_none(product_id)
    if product is None:
        raise ProductNotFound(product_id)
    return product


@store.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        get_category(command.category_id)
        get_manufacturer(command.manufacturer_id)

        product = Product.create(
            name=command.name,
            price=command.price,
            stock_quantity=command.stock_quantity,
            description=command.description,
            component_characteristic=command.component_characteristic,
            category_id=command.category_id,
            manufacturer_id=command.manufacturer_id,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("product_created", product_id=str(product.id), name=product.name)
        return product

    @handle(UpdateProduct)
    def update_product(self, command):
        product = get_product(command.product_id)
        if command.category_id:
            get_category(command.category_id)
        if command.manufacturer_id:
            get_manufacturer(command.manufacturer_id)

        product.update_details(
            name=command.name,
            price=command.price,
            description=command.description,
            component_characteristic=command.component_characteristic,
            category_id=command.category_id,
            manufacturer_id=command.manufacturer_id,
        )
        current_domain.repository_for(Product).add(product)
        return product

    @handle(UpdateStockQuantity)
    def update_stock_quantity(self, command):
        product = get_product(command.product_id)
        product.change_stock_quantity(command.stock_quantity)
        current_domain.repository_for(Product).add(product)
        return product

    @handle(DeleteProduct)
    def delete_product(self, command):
        product = get_product(command.product_id)
        current_domain.repository_for(Product)._dao.delete(product)
        logger.info("product_deleted", product_id=str(product.id))
        return product
