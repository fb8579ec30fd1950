"""Tests for stock handling on the Product aggregate."""

import pytest
from pcstore.product.events import ProductCreated, StockQuantityChanged
from pcstore.product.product import Product
from pcstore.shared.errors import QuantityExceedsStock
from protean.exceptions import ValidationError


def _product(stock_quantity=5):
    product = Product.create(
        name="Ryzen 7 7800X3D",
        price=449.0,
        category_id="cat-cpu",
        manufacturer_id="man-amd",
        stock_quantity=stock_quantity,
    )
    product._events.clear()
    return product


class TestProductCreation:
    def test_create_raises_event(self):
        product = Product.create(name="Ryzen 5", price=199.0, category_id="cat-cpu", manufacturer_id="man-amd")
        assert product.stock_quantity == 0
        assert isinstance(product._events[-1], ProductCreated)

    def test_price_must_be_positive(self):
        with pytest.raises(ValidationError):
            Product.create(name="Free CPU", price=0, category_id="cat-cpu", manufacturer_id="man-amd")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            Product.create(
                name="Ryzen 5",
                price=199.0,
                category_id="cat-cpu",
                manufacturer_id="man-amd",
                stock_quantity=-1,
            )


class TestStockChecks:
    def test_has_stock_for_exact_quantity(self):
        assert _product(5).has_stock_for(5)

    def test_has_no_stock_for_more(self):
        assert not _product(5).has_stock_for(6)

    def test_ensure_stock_for_raises_with_details(self):
        product = _product(5)
        with pytest.raises(QuantityExceedsStock) as exc:
            product.ensure_stock_for(6)
        assert exc.value.requested == 6
        assert exc.value.available == 5
        assert "exceeds stock" in exc.value.message


class TestStockChanges:
    def test_decrement_stock(self):
        product = _product(5)
        product.decrement_stock(2)
        assert product.stock_quantity == 3

        event = product._events[-1]
        assert isinstance(event, StockQuantityChanged)
        assert event.previous_quantity == 5
        assert event.new_quantity == 3

    def test_decrement_to_zero(self):
        product = _product(2)
        product.decrement_stock(2)
        assert product.stock_quantity == 0

    def test_decrement_beyond_stock_leaves_quantity_untouched(self):
        product = _product(1)
        with pytest.raises(QuantityExceedsStock):
            product.decrement_stock(2)
        assert product.stock_quantity == 1
        assert product._events == []
