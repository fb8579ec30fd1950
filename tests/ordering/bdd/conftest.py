"""Shared BDD fixtures and step definitions for the Ordering context."""

import pytest
from factories import add_to_cart, create_product, create_user
from pcstore.cart.cart_item import CartItem
from pcstore.order.order import Order
from pcstore.product.product import Product
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def outcome():
    """Container for the Result of the step under test."""
    return {"result": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a product "{name}" priced {price:f} with {stock:d} in stock'),
    target_fixture="product",
)
def product_in_stock(name, price, stock):
    return create_product(name=name, price=price, stock_quantity=stock)


@given("a registered user", target_fixture="user")
def registered_user():
    return create_user()


@given(parsers.cfparse("the user has {quantity:d} of the product in their cart"))
def user_has_cart_item(user, product, quantity):
    add_to_cart(user, product, quantity=quantity)


@given(parsers.cfparse("the product stock is changed to {stock:d}"))
def product_stock_changed(product, stock):
    repo = current_domain.repository_for(Product)
    stored = repo.get(product.id)
    stored.change_stock_quantity(stock)
    repo.add(stored)


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the product has {stock:d} in stock"))
def product_has_stock(product, stock):
    assert current_domain.repository_for(Product).get(product.id).stock_quantity == stock


@then("the user's cart is empty")
def cart_is_empty(user):
    assert current_domain.repository_for(CartItem).get_by_user_id(user.id) == []


@then(parsers.cfparse("the user's cart still holds {count:d} line"))
@then(parsers.cfparse("the user's cart holds {count:d} line"))
def cart_holds_lines(user, count):
    assert len(current_domain.repository_for(CartItem).get_by_user_id(user.id)) == count


@then("no order exists")
def no_order_exists():
    assert current_domain.repository_for(Order).list_all() == []
