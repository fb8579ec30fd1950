"""Favourite products: commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from pcstore.domain import store
from pcstore.product.management import get_product
from pcstore.shared.errors import UserNotFound
from pcstore.user.user import User


@store.command(part_of="User")
class AddFavoriteProduct:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@store.command(part_of="User")
class RemoveFavoriteProduct:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


def get_user(user_id) -> User:
    user = current_domain.repository_for(User).get_or_none(user_id)
    if user is None:
        raise UserNotFound(user_id)
    return user


@store.command_handler(part_of=User)
class FavoriteProductsHandler:
    @handle(AddFavoriteProduct)
    def add_favorite_product(self, command):
        user = get_user(command.user_id)
        get_product(command.product_id)
        user.add_favorite_product(command.product_id)
        current_domain.repository_for(User).add(user)
        return user

    @handle(RemoveFavoriteProduct)
    def remove_favorite_product(self, command):
        user = get_user(command.user_id)
        user.remove_favorite_product(command.product_id)
        current_domain.repository_for(User).add(user)
        return user
