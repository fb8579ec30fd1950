"""Read-side helpers for cart items and orders."""

from protean.utils.globals import current_domain

from pcstore.cart.cart_item import CartItem
from pcstore.order.order import Order


def list_cart_items():
    return current_domain.repository_for(CartItem).list_all()


def find_cart_item(cart_item_id):
    return current_domain.repository_for(CartItem).get_in_cart(cart_item_id)


def cart_of_user(user_id):
    return current_domain.repository_for(CartItem).get_by_user_id(user_id)


def list_orders():
    return current_domain.repository_for(Order).list_all()


def find_order(order_id):
    return current_domain.repository_for(Order).get_or_none(order_id)


def orders_of_user(user_id):
    return current_domain.repository_for(Order).find_by_user(user_id)
