"""Product aggregate root with its Image entity and repository."""

from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from pcstore.domain import store
from pcstore.shared.errors import ProductImageNotFound, ProductNotFound, QuantityExceedsStock

MAX_IMAGES = 10


@store.entity(part_of="Product")
class ProductImage:
    url: String(required=True, max_length=500)
    display_order: Integer(default=0)


@store.aggregate
class Product:
    """A sellable PC component.

    ``stock_quantity`` is the count available for sale. It changes only through
    order placement or an explicit stock update and can never go below zero.
    """

    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.01)
    stock_quantity: Integer(default=0, min_value=0)
    description: Text()
    component_characteristic: Text()
    category_id: Identifier(required=True)
    manufacturer_id: Identifier(required=True)
    images: HasMany(ProductImage)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def images_cannot_exceed_maximum(self):
        if len(self.images) > MAX_IMAGES:
            raise ValidationError({"images": [f"Cannot have more than {MAX_IMAGES} images"]})

    @classmethod
    def create(
        cls,
        name,
        price,
        category_id,
        manufacturer_id,
        stock_quantity=0,
        description=None,
        component_characteristic=None,
    ):
        from pcstore.product.events import ProductCreated

        now = datetime.now()
        product = cls(
            name=name,
            price=price,
            stock_quantity=stock_quantity,
            description=description,
            component_characteristic=component_characteristic,
            category_id=category_id,
            manufacturer_id=manufacturer_id,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                price=price,
                stock_quantity=stock_quantity,
                category_id=category_id,
                manufacturer_id=manufacturer_id,
            )
        )
        return product

    def update_details(
        self,
        name=None,
        price=None,
        description=None,
        component_characteristic=None,
        category_id=None,
        manufacturer_id=None,
    ):
        from pcstore.product.events import ProductDetailsUpdated

        if name is not None:
            self.name = name
        if price is not None:
            self.price = price
        if description is not None:
            self.description = description
        if component_characteristic is not None:
            self.component_characteristic = component_characteristic
        if category_id is not None:
            self.category_id = category_id
        if manufacturer_id is not None:
            self.manufacturer_id = manufacturer_id
        self.updated_at = datetime.now()

        self.raise_(ProductDetailsUpdated(product_id=self.id, name=self.name, price=self.price))

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def has_stock_for(self, quantity) -> bool:
        return quantity <= self.stock_quantity

    def ensure_stock_for(self, quantity):
        if not self.has_stock_for(quantity):
            raise QuantityExceedsStock(self.id, requested=quantity, available=self.stock_quantity)

    def change_stock_quantity(self, stock_quantity, reason="Manual update"):
        from pcstore.product.events import StockQuantityChanged

        previous = self.stock_quantity
        self.stock_quantity = stock_quantity
        self.updated_at = datetime.now()

        self.raise_(
            StockQuantityChanged(
                product_id=self.id,
                previous_quantity=previous,
                new_quantity=stock_quantity,
                reason=reason,
            )
        )

    def decrement_stock(self, quantity):
        """Take ``quantity`` units out of stock for an order."""
        self.ensure_stock_for(quantity)
        self.change_stock_quantity(self.stock_quantity - quantity, reason="Order placed")

    # -------------------------------------------------------------------
    # Images
    # -------------------------------------------------------------------
    def add_image(self, url):
        from pcstore.product.events import ProductImageAdded

        image = ProductImage(url=url, display_order=len(self.images))
        self.add_images(image)
        self.updated_at = datetime.now()

        self.raise_(ProductImageAdded(product_id=self.id, image_id=image.id, url=url))
        return image

    def remove_image(self, image_id):
        from pcstore.product.events import ProductImageRemoved

        image = next((i for i in self.images if str(i.id) == str(image_id)), None)
        if image is None:
            raise ProductImageNotFound(image_id)

        with atomic_change(self):
            self.remove_images(image)
            for position, remaining in enumerate(sorted(self.images, key=lambda i: i.display_order)):
                remaining.display_order = position

        self.updated_at = datetime.now()
        self.raise_(ProductImageRemoved(product_id=self.id, image_id=image_id))


@store.repository(part_of=Product)
class ProductRepository:
    def get_or_none(self, product_id) -> Product | None:
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            return None

    def count_by_category(self, category_id) -> int:
        return self._dao.query.filter(category_id=str(category_id)).all().total

    def count_by_manufacturer(self, manufacturer_id) -> int:
        return self._dao.query.filter(manufacturer_id=str(manufacturer_id)).all().total

    def filter_products(
        self,
        category_id=None,
        manufacturer_ids=None,
        name=None,
        min_price=None,
        max_price=None,
        min_stock_quantity=None,
        max_stock_quantity=None,
    ) -> list[Product]:
        criteria = {}
        if category_id:
            criteria["category_id"] = str(category_id)
        if manufacturer_ids:
            criteria["manufacturer_id__in"] = [str(m) for m in manufacturer_ids]
        if name:
            criteria["name__icontains"] = name
        if min_price is not None:
            criteria["price__gte"] = min_price
        if max_price is not None:
            criteria["price__lte"] = max_price
        if min_stock_quantity is not None:
            criteria["stock_quantity__gte"] = min_stock_quantity
        if max_stock_quantity is not None:
            criteria["stock_quantity__lte"] = max_stock_quantity

        query = self._dao.query
        if criteria:
            query = query.filter(**criteria)
        return query.order_by("name").all().items

    def decrement_stock_for_items(self, items):
        """Reduce stock of every product referenced by ``items`` by the line quantity.

        Raises ``ProductNotFound`` when a referenced product no longer exists and
        ``QuantityExceedsStock`` when a line asks for more than is left.
        """
        totals = {}
        for item in items:
            totals[str(item.product_id)] = totals.get(str(item.product_id), 0) + item.quantity

        for product_id, quantity in totals.items():
            product = self.get_or_none(product_id)
            if product is None:
                raise ProductNotFound(product_id)
            product.decrement_stock(quantity)
            self.add(product)
