"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from pcstore.domain import store


@store.event(part_of="User")
class UserRegistered:
    """A new account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    roles: Text(required=True)
    registered_at: DateTime(required=True)


@store.event(part_of="User")
class FavoriteProductAdded:
    __version__ = 1

    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@store.event(part_of="User")
class FavoriteProductRemoved:
    __version__ = 1

    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
