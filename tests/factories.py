"""Helpers that build persisted catalogue, identity and cart state for tests."""

from pcstore.auth.passwords import hash_password
from pcstore.cart.items import AddCartItem
from pcstore.category.management import CreateCategory
from pcstore.manufacturer.management import CreateManufacturer
from pcstore.product.management import CreateProduct
from pcstore.user.user import User
from protean.utils.globals import current_domain


def process(command):
    return current_domain.process(command, asynchronous=False)


def create_category(name="Graphics Cards", description=None):
    return process(CreateCategory(name=name, description=description))


def create_manufacturer(name="ASUS"):
    return process(CreateManufacturer(name=name))


def create_product(name="GeForce RTX 4070", price=599.0, stock_quantity=5, category=None, manufacturer=None):
    category = category or create_category()
    manufacturer = manufacturer or create_manufacturer()
    return process(
        CreateProduct(
            name=name,
            price=price,
            stock_quantity=stock_quantity,
            category_id=category.id,
            manufacturer_id=manufacturer.id,
        )
    )


def create_user(email="jane@example.com", password="secret-pass"):
    user = User.register(email=email, password_hash=hash_password(password))
    current_domain.repository_for(User).add(user)
    return user


def add_to_cart(user, product, quantity=1):
    return process(AddCartItem(user_id=user.id, product_id=product.id, quantity=quantity))
