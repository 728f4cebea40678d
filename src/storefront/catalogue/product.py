"""Product aggregate and its repository.

Products are read by the catalogue and by order placement. The only
mutation after creation is the stock decrement performed when an order
is placed.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from storefront.catalogue.events import ProductAdded, StockDecremented
from storefront.domain import storefront
from storefront.errors import InsufficientStock


@storefront.aggregate(limit=-1)
class Product:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    category = String(required=True, max_length=50)
    image_url = String(max_length=1024)
    stock = Integer(default=0, min_value=0)
    featured = Boolean(default=False)
    created_at = DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def add(cls, name, price, category, description=None, image_url=None, stock=0, featured=False):
        """Add a product to the catalogue."""
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            category=category,
            image_url=image_url,
            stock=stock,
            featured=featured,
            created_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=name,
                category=category,
                stock=stock,
                added_at=now,
            )
        )
        return product

    def has_stock_for(self, quantity):
        return self.stock >= quantity

    def decrement_stock(self, quantity):
        """Take ``quantity`` units out of stock; stock never goes negative."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if not self.has_stock_for(quantity):
            raise InsufficientStock({"stock": [f"Insufficient stock for {self.name}"]})

        previous_stock = self.stock
        self.stock = previous_stock - quantity

        self.raise_(
            StockDecremented(
                product_id=str(self.id),
                quantity=quantity,
                previous_stock=previous_stock,
                remaining_stock=self.stock,
            )
        )


@storefront.repository(part_of=Product)
class ProductRepository:
    def get_product(self, product_id) -> Product:
        """Fetch a product, reporting a missing one by its identifier."""
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError(f"Product {product_id} not found") from None

    def find_by_name(self, name: str) -> Product | None:
        return self._dao.query.filter(name=name).all().first

    def find_filtered(self, category=None, featured=None) -> list[Product]:
        filters = {}
        if category:
            filters["category"] = category
        if featured is not None:
            filters["featured"] = featured

        query = self._dao.query.filter(**filters) if filters else self._dao.query
        return query.order_by("name").all().items

    def count(self) -> int:
        return self._dao.query.all().total
