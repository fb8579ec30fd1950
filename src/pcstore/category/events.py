"""Domain events for the Category aggregate."""

from protean.fields import Identifier, String

from pcstore.domain import store


@store.event(part_of="Category")
class CategoryCreated:
    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)


@store.event(part_of="Category")
class CategoryDetailsUpdated:
    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
