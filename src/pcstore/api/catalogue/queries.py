"""Read-side lookups for the catalogue."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from pcstore.category.category import Category
from pcstore.manufacturer.manufacturer import Manufacturer
from pcstore.product.product import Product


def _get_or_none(aggregate_cls, identifier):
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        return None


def _all_by_name(aggregate_cls):
    return current_domain.repository_for(aggregate_cls)._dao.query.order_by("name").all().items


def list_categories() -> list[Category]:
    return _all_by_name(Category)


def find_category(category_id) -> Category | None:
    return _get_or_none(Category, category_id)


def list_manufacturers() -> list[Manufacturer]:
    return _all_by_name(Manufacturer)


def find_manufacturer(manufacturer_id) -> Manufacturer | None:
    return _get_or_none(Manufacturer, manufacturer_id)


def list_products() -> list[Product]:
    return _all_by_name(Product)


def find_product(product_id) -> Product | None:
    return current_domain.repository_for(Product).get_or_none(product_id)


def filter_products(**criteria) -> list[Product]:
    return current_domain.repository_for(Product).filter_products(**criteria)
