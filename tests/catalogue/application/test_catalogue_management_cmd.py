"""Application tests for category, manufacturer and product commands."""

import pytest
from factories import create_category, create_manufacturer, create_product, process
from pcstore.category.category import Category
from pcstore.category.management import DeleteCategory, UpdateCategory
from pcstore.manufacturer.management import DeleteManufacturer, RenameManufacturer
from pcstore.manufacturer.manufacturer import Manufacturer
from pcstore.product.images import AddProductImage, RemoveProductImage
from pcstore.product.management import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
    UpdateStockQuantity,
)
from pcstore.product.product import Product
from pcstore.shared.errors import (
    CategoryHasRelatedProducts,
    CategoryNotFound,
    ManufacturerHasRelatedProducts,
    ManufacturerNotFound,
    ProductNotFound,
)
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain


class TestCategoryCommands:
    def test_update_category(self):
        category = create_category()
        process(UpdateCategory(category_id=category.id, description="Discrete GPUs"))

        category = current_domain.repository_for(Category).get(category.id)
        assert category.name == "Graphics Cards"
        assert category.description == "Discrete GPUs"

    def test_update_missing_category(self):
        with pytest.raises(CategoryNotFound):
            process(UpdateCategory(category_id="missing", name="Nothing"))

    def test_delete_unreferenced_category(self):
        category = create_category()
        process(DeleteCategory(category_id=category.id))

        assert current_domain.repository_for(Category)._dao.query.all().total == 0

    def test_delete_referenced_category_is_refused(self):
        category = create_category()
        create_product(category=category)

        with pytest.raises(CategoryHasRelatedProducts):
            process(DeleteCategory(category_id=category.id))
        assert current_domain.repository_for(Category).get(category.id) is not None


class TestManufacturerCommands:
    def test_rename(self):
        manufacturer = create_manufacturer()
        process(RenameManufacturer(manufacturer_id=manufacturer.id, name="ASUSTeK"))

        assert current_domain.repository_for(Manufacturer).get(manufacturer.id).name == "ASUSTeK"

    def test_delete_missing(self):
        with pytest.raises(ManufacturerNotFound):
            process(DeleteManufacturer(manufacturer_id="missing"))

    def test_delete_referenced_manufacturer_is_refused(self):
        manufacturer = create_manufacturer()
        create_product(manufacturer=manufacturer)

        with pytest.raises(ManufacturerHasRelatedProducts):
            process(DeleteManufacturer(manufacturer_id=manufacturer.id))


class TestProductCommands:
    def test_create_persists(self):
        product = create_product(stock_quantity=7)

        stored = current_domain.repository_for(Product).get(product.id)
        assert stored.name == "GeForce RTX 4070"
        assert stored.stock_quantity == 7

    def test_create_with_unknown_category(self):
        manufacturer = create_manufacturer()
        with pytest.raises(CategoryNotFound):
            process(
                CreateProduct(
                    name="Orphan",
                    price=10.0,
                    category_id="missing",
                    manufacturer_id=manufacturer.id,
                )
            )

    def test_update_details(self):
        product = create_product()
        process(UpdateProduct(product_id=product.id, price=549.0))

        stored = current_domain.repository_for(Product).get(product.id)
        assert stored.price == 549.0
        assert stored.name == "GeForce RTX 4070"

    def test_update_stock_quantity(self):
        product = create_product(stock_quantity=5)
        process(UpdateStockQuantity(product_id=product.id, stock_quantity=12))

        assert current_domain.repository_for(Product).get(product.id).stock_quantity == 12

    def test_negative_stock_quantity_rejected(self):
        product = create_product()
        with pytest.raises(ValidationError):
            process(UpdateStockQuantity(product_id=product.id, stock_quantity=-3))

    def test_delete_missing_product(self):
        with pytest.raises(ProductNotFound):
            process(DeleteProduct(product_id="missing"))

    def test_delete_product(self):
        product = create_product()
        process(DeleteProduct(product_id=product.id))

        assert current_domain.repository_for(Product).get_or_none(product.id) is None

    def test_images_round_trip_through_repository(self):
        product = create_product()
        process(AddProductImage(product_id=product.id, url="https://cdn.example.com/a.jpg"))
        stored = current_domain.repository_for(Product).get(product.id)
        assert len(stored.images) == 1

        process(RemoveProductImage(product_id=product.id, image_id=stored.images[0].id))
        assert current_domain.repository_for(Product).get(product.id).images == []
