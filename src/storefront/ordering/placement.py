"""Order placement: command and handler.

The handler runs inside one unit of work: every line is validated against
live stock before anything is written, and the order together with its
stock decrements is committed as a whole or not at all.
"""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import InsufficientStock
from storefront.identity.user import User
from storefront.ordering.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_ADDRESS_FIELDS = ("street", "city", "state", "zip_code", "country")


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {product_id, quantity}
    shipping_address = Text(required=True)  # JSON: address dict


def _loads(value):
    return json.loads(value) if isinstance(value, str) else value


def _requested_lines(items):
    """Validate the raw item payload and return (product_id, quantity) pairs."""
    if not isinstance(items, list) or not items:
        raise ValidationError({"items": ["Order must contain at least one item"]})

    lines = []
    for item in items:
        product_id = str(item.get("product_id") or "").strip() if isinstance(item, dict) else ""
        if not product_id:
            raise ValidationError({"product_id": ["Each item needs a product id"]})

        quantity = item.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError({"quantity": [f"Quantity for product {product_id} must be a positive integer"]})

        lines.append((product_id, quantity))
    return lines


def _shipping_address(address):
    if not isinstance(address, dict):
        raise ValidationError({"shipping_address": ["Shipping address is required"]})

    missing = [name for name in _ADDRESS_FIELDS if not str(address.get(name) or "").strip()]
    if missing:
        raise ValidationError({"shipping_address": [f"Missing address fields: {', '.join(missing)}"]})
    return {name: str(address[name]).strip() for name in _ADDRESS_FIELDS}


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        requested = _requested_lines(_loads(command.items))
        address = _shipping_address(_loads(command.shipping_address))

        current_domain.repository_for(User).get_user(command.user_id)

        product_repo = current_domain.repository_for(Product)
        products = {}
        reserved = {}
        snapshot = []

        # Validate every line before writing anything
        for product_id, quantity in requested:
            product = products.get(product_id)
            if product is None:
                product = product_repo.get_product(product_id)
                products[product_id] = product

            # Lines naming the same product draw on the same stock
            reserved[product_id] = reserved.get(product_id, 0) + quantity
            if not product.has_stock_for(reserved[product_id]):
                raise InsufficientStock({"stock": [f"Insufficient stock for {product.name}"]})

            snapshot.append(
                {
                    "product_id": product_id,
                    "name": product.name,
                    "price": product.price,
                    "quantity": quantity,
                }
            )

        order = Order.place(user_id=command.user_id, lines=snapshot, shipping_address=address)
        current_domain.repository_for(Order).add(order)

        for product_id, quantity in reserved.items():
            product = products[product_id]
            product.decrement_stock(quantity)
            product_repo.add(product)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            items=len(snapshot),
            total=order.total,
        )
        return str(order.id)
