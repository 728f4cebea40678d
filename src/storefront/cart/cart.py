"""Client-side shopping cart.

The cart holds one line per product and writes its full snapshot to the
injected storage after every change. Persistence is best effort: a failed
write is logged and the in-memory cart stays authoritative for the session.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from storefront.cart.storage import CartStorage
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartItem(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    product_id: str
    name: str
    price: float = Field(ge=0)
    image_url: str | None = None
    quantity: int = Field(default=1, ge=1)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


_snapshot = TypeAdapter(list[CartItem])


class CartStore:
    def __init__(self, storage: CartStorage):
        self._storage = storage
        self._items: dict[str, CartItem] = self._hydrate()

    def _hydrate(self) -> dict[str, CartItem]:
        try:
            payload = self._storage.load()
        except (OSError, ValueError) as exc:
            logger.warning("cart_load_failed", error=str(exc))
            return {}
        if not payload:
            return {}

        try:
            stored = _snapshot.validate_json(payload)
        except ValidationError as exc:
            logger.warning("cart_snapshot_discarded", errors=exc.error_count())
            return {}

        items: dict[str, CartItem] = {}
        for item in stored:
            existing = items.get(item.product_id)
            if existing is not None:
                item = existing.model_copy(update={"quantity": existing.quantity + item.quantity})
            items[item.product_id] = item
        return items

    def _persist(self) -> None:
        payload = _snapshot.dump_json(list(self._items.values()), by_alias=True).decode()
        try:
            self._storage.save(payload)
        except OSError as exc:
            logger.warning("cart_save_failed", error=str(exc))

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_to_cart(self, item: CartItem, quantity: int = 1) -> None:
        """Add ``quantity`` of ``item``, merging into an existing line for the same product."""
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")

        existing = self._items.get(item.product_id)
        if existing is not None:
            self._items[item.product_id] = existing.model_copy(update={"quantity": existing.quantity + quantity})
        else:
            self._items[item.product_id] = item.model_copy(update={"quantity": quantity})
        self._persist()

    def remove_from_cart(self, product_id: str) -> None:
        if self._items.pop(product_id, None) is not None:
            self._persist()

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_from_cart(product_id)
            return

        existing = self._items.get(product_id)
        if existing is None:
            return
        self._items[product_id] = existing.model_copy(update={"quantity": quantity})
        self._persist()

    def clear_cart(self) -> None:
        self._items.clear()
        self._persist()

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items.values())

    def get_total_items(self) -> int:
        return sum(item.quantity for item in self._items.values())

    def get_total_price(self) -> float:
        return sum(item.line_total for item in self._items.values())

    def is_in_cart(self, product_id: str) -> bool:
        return product_id in self._items

    def get_cart_item_quantity(self, product_id: str) -> int:
        item = self._items.get(product_id)
        return item.quantity if item is not None else 0

    def __len__(self) -> int:
        return len(self._items)
