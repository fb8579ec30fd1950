"""Category aggregate: a product grouping such as "Graphics Cards"."""

from datetime import datetime

from protean.fields import DateTime, String, Text

from pcstore.domain import store


@store.aggregate
class Category:
    """A top-level grouping of products in the catalogue.

    A category cannot be deleted while products still reference it.
    """

    name: String(required=True, max_length=100)
    description: Text()
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, description=None):
        from pcstore.category.events import CategoryCreated

        now = datetime.now()
        category = cls(name=name, description=description, created_at=now, updated_at=now)
        category.raise_(CategoryCreated(category_id=category.id, name=name))
        return category

    def update_details(self, name=None, description=None):
        from pcstore.category.events import CategoryDetailsUpdated

        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        self.updated_at = datetime.now()

        self.raise_(CategoryDetailsUpdated(category_id=self.id, name=self.name))
