"""Idempotent database initialisation."""

from dataclasses import dataclass

from protean import handle
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.identity.user import User
from storefront.ordering.order import Order
from storefront.seeding import data
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SeedResult:
    products: int
    users: int
    orders: int
    created: bool
    message: str


def _counts():
    return (
        current_domain.repository_for(Product).count(),
        current_domain.repository_for(User).count(),
        current_domain.repository_for(Order).count(),
    )


def _seed_products():
    repo = current_domain.repository_for(Product)
    products = {}
    for entry in data.PRODUCTS:
        product = repo.find_by_name(entry["name"])
        if product is None:
            product = Product.add(**entry)
            repo.add(product)
        products[product.name] = product
    return products


def _seed_users():
    repo = current_domain.repository_for(User)
    users = {}
    for entry in data.USERS:
        user = repo.find_by_email(entry["email"])
        if user is None:
            user = User.register(email=entry["email"], name=entry["name"], role=entry["role"])
            repo.add(user)
        users[user.email] = user
    return users


def _seed_orders(products, users):
    """Sample orders are history: they do not draw down stock."""
    repo = current_domain.repository_for(Order)
    created = 0
    for entry in data.ORDERS:
        user = users.get(entry["email"])
        lines = [
            {
                "product_id": str(products[name].id),
                "name": products[name].name,
                "price": products[name].price,
                "quantity": quantity,
            }
            for name, quantity in entry["items"]
            if name in products
        ]
        if user is None or len(lines) != len(entry["items"]):
            continue

        order = Order.place(user_id=str(user.id), lines=lines, shipping_address=entry["shipping_address"])
        for status in data.STATUS_PATH[entry["status"]]:
            order.change_status(status)
        repo.add(order)
        created += 1
    return created


@storefront.command(part_of="Product")
class SeedDatabase:
    """Load the seed catalogue, users and sample orders unless already present."""


@storefront.command_handler(part_of=Product)
class SeedDatabaseHandler:
    @handle(SeedDatabase)
    def seed_database(self, _command) -> SeedResult:
        return _seed()


def _seed() -> SeedResult:
    already_seeded = (
        current_domain.repository_for(User).find_by_email(data.ADMIN_EMAIL) is not None
        or current_domain.repository_for(Product).find_by_name(data.PRODUCTS[0]["name"]) is not None
    )
    if already_seeded:
        products, users, orders = _counts()
        logger.info("seed_skipped", products=products, users=users, orders=orders)
        return SeedResult(products, users, orders, created=False, message="Database already initialized")

    products = _seed_products()
    users = _seed_users()
    orders = _seed_orders(products, users)

    logger.info("seed_completed", products=len(products), users=len(users), orders=orders)
    return SeedResult(
        products=len(products),
        users=len(users),
        orders=orders,
        created=True,
        message="Database initialized successfully",
    )


def seed_database() -> SeedResult:
    return current_domain.process(SeedDatabase(), asynchronous=False)
