"""Category management: commands and handlers."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from pcstore.category.category import Category
from pcstore.domain import logger, store
from pcstore.product.product import Product
from pcstore.shared.errors import CategoryHasRelatedProducts, CategoryNotFound


@store.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: Text()


@store.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(max_length=100)
    description: Text()


@store.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


def get_category(category_id) -> Category:
    try:
        return current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise CategoryNotFound(category_id) from None


@store.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(name=command.name, description=command.description)
        current_domain.repository_for(Category).add(category)
        return category

    @handle(UpdateCategory)
    def update_category(self, command):
        category = get_category(command.category_id)
        category.update_details(name=command.name, description=command.description)
        current_domain.repository_for(Category).add(category)
        return category

    @handle(DeleteCategory)
    def delete_category(self, command):
        category = get_category(command.category_id)
        if current_domain.repository_for(Product).count_by_category(category.id) > 0:
            raise CategoryHasRelatedProducts(category.id)

        current_domain.repository_for(Category)._dao.delete(category)
        logger.info("category_deleted", category_id=str(category.id))
        return category
