"""Order aggregate: an immutable purchase record with a status lifecycle.

Line items are snapshots: product name and price are copied at placement
time so later catalogue changes never alter a past order.

Status lifecycle:
    PROCESSING → SHIPPED → DELIVERED
    PROCESSING / SHIPPED → CANCELLED
    DELIVERED and CANCELLED are terminal.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.ordering.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


_VALID_TRANSITIONS = {
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


def order_total(lines):
    """Sum of price × quantity over line items, rounded to cents."""
    return round(sum(line["price"] * line["quantity"] for line in lines), 2)


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships, captured at checkout and never changed."""

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order", limit=-1)
class OrderItem:
    """A snapshot of one product and quantity as it was when the order was placed."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate(limit=-1)
class Order:
    user_id = Identifier(required=True)
    items = HasMany(OrderItem)
    total = Float(required=True, min_value=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.PROCESSING.value)
    shipping_address = ValueObject(ShippingAddress)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_must_equal_sum_of_line_items(self):
        if not self.items:
            return
        expected = round(sum(item.price * item.quantity for item in self.items), 2)
        if abs(expected - self.total) > 0.005:
            raise ValidationError({"total": [f"Order total {self.total} does not match line items ({expected})"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, lines, shipping_address):
        """Create an order from snapshot lines.

        Args:
            user_id: The user placing the order.
            lines: List of dicts with product_id, name, price, quantity.
            shipping_address: Dict with street, city, state, zip_code, country.
        """
        if not lines:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        now = datetime.now(UTC)
        total = order_total(lines)
        order = cls(
            user_id=user_id,
            items=[
                OrderItem(
                    product_id=str(line["product_id"]),
                    name=line["name"],
                    price=line["price"],
                    quantity=line["quantity"],
                )
                for line in lines
            ],
            total=total,
            status=OrderStatus.PROCESSING.value,
            shipping_address=ShippingAddress(**shipping_address),
            created_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                item_count=len(lines),
                total=total,
                status=order.status,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status lifecycle
    # -------------------------------------------------------------------
    def change_status(self, new_status):
        """Move the order to ``new_status`` if the lifecycle allows it."""
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status '{new_status}'"]}) from None

        current = OrderStatus(self.status)
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )


@storefront.repository(part_of=Order)
class OrderRepository:
    def get_order(self, order_id) -> Order:
        try:
            return self.get(order_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError(f"Order {order_id} not found") from None

    def find_filtered(self, user_id=None, status=None) -> list[Order]:
        """Orders matching the given user and status, newest first."""
        filters = {}
        if user_id:
            filters["user_id"] = user_id
        if status:
            filters["status"] = status

        query = self._dao.query.filter(**filters) if filters else self._dao.query
        return query.order_by("-created_at").all().items

    def count(self) -> int:
        return self._dao.query.all().total
