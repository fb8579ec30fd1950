"""Domain events for the Manufacturer aggregate."""

from protean.fields import Identifier, String

from pcstore.domain import store


@store.event(part_of="Manufacturer")
class ManufacturerCreated:
    __version__ = 1

    manufacturer_id: Identifier(required=True)
    name: String(required=True)


@store.event(part_of="Manufacturer")
class ManufacturerRenamed:
    __version__ = 1

    manufacturer_id: Identifier(required=True)
    previous_name: String(required=True)
    name: String(required=True)
