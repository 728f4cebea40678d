"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    category = String(required=True)
    stock = Integer(required=True)
    added_at = DateTime(required=True)


@storefront.event(part_of="Product")
class StockDecremented:
    """Units of a product were taken out of stock by an order."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_stock = Integer(required=True)
    remaining_stock = Integer(required=True)
