"""Manufacturer management: commands and handlers."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from pcstore.domain import logger, store
from pcstore.manufacturer.manufacturer import Manufacturer
from pcstore.product.product import Product
from pcstore.shared.errors import ManufacturerHasRelatedProducts, ManufacturerNotFound


@store.command(part_of="Manufacturer")
class CreateManufacturer:
    name: String(required=True, max_length=100)


@store.command(part_of="Manufacturer")
class RenameManufacturer:
    manufacturer_id: Identifier(required=True)
    name: String(required=True, max_length=100)


@store.command(part_of="Manufacturer")
class DeleteManufacturer:
    manufacturer_id: Identifier(required=True)


def get_manufacturer(manufacturer_id) -> Manufacturer:
    try:
        return current_domain.repository_for(Manufacturer).get(manufacturer_id)
    except ObjectNotFoundError:
        raise ManufacturerNotFound(manufacturer_id) from None


@store.command_handler(part_of=Manufacturer)
class ManageManufacturerHandler:
    @handle(CreateManufacturer)
    def create_manufacturer(self, command):
        manufacturer = Manufacturer.create(name=command.name)
        current_domain.repository_for(Manufacturer).add(manufacturer)
        return manufacturer

    @handle(RenameManufacturer)
    def rename_manufacturer(self, command):
        manufacturer = get_manufacturer(command.manufacturer_id)
        manufacturer.rename(command.name)
        current_domain.repository_for(Manufacturer).add(manufacturer)
        return manufacturer

    @handle(DeleteManufacturer)
    def delete_manufacturer(self, command):
        manufacturer = get_manufacturer(command.manufacturer_id)
        if current_domain.repository_for(Product).count_by_manufacturer(manufacturer.id) > 0:
            raise ManufacturerHasRelatedProducts(manufacturer.id)

        current_domain.repository_for(Manufacturer)._dao.delete(manufacturer)
        logger.info("manufacturer_deleted", manufacturer_id=str(manufacturer.id))
        return manufacturer
