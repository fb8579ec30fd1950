"""Manufacturer aggregate: the maker of a component, e.g. "ASUS"."""

from datetime import datetime

from protean.fields import DateTime, String

from pcstore.domain import store


@store.aggregate
class Manufacturer:
    name: String(required=True, max_length=100)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name):
        from pcstore.manufacturer.events import ManufacturerCreated

        now = datetime.now()
        manufacturer = cls(name=name, created_at=now, updated_at=now)
        manufacturer.raise_(ManufacturerCreated(manufacturer_id=manufacturer.id, name=name))
        return manufacturer

    def rename(self, name):
        from pcstore.manufacturer.events import ManufacturerRenamed

        previous_name = self.name
        self.name = name
        self.updated_at = datetime.now()

        self.raise_(ManufacturerRenamed(manufacturer_id=self.id, previous_name=previous_name, name=name))
