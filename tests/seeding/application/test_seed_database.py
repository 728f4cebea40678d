"""Application tests for database seeding."""

from protean import current_domain
from storefront.catalogue.product import Product
from storefront.identity.user import User
from storefront.ordering import queries
from storefront.ordering.order import Order
from storefront.seeding import data
from storefront.seeding.seed import seed_database


class TestSeedDatabase:
    def test_first_run_seeds_everything(self):
        result = seed_database()

        assert result.created is True
        assert result.message == "Database initialized successfully"
        assert (result.products, result.users, result.orders) == (20, 8, 3)
        assert current_domain.repository_for(Product).count() == 20
        assert current_domain.repository_for(User).count() == 8
        assert current_domain.repository_for(Order).count() == 3

    def test_second_run_is_a_no_op(self):
        seed_database()

        result = seed_database()

        assert result.created is False
        assert result.message == "Database already initialized"
        assert (result.products, result.users, result.orders) == (20, 8, 3)

    def test_existing_admin_skips_seeding(self, add_user):
        add_user(email=data.ADMIN_EMAIL, name="Admin User", role="admin")

        result = seed_database()

        assert result.created is False
        assert (result.products, result.users, result.orders) == (0, 1, 0)

    def test_sample_orders_reach_their_statuses(self):
        seed_database()

        statuses = sorted(o["status"] for o in queries.list_orders())
        assert statuses == ["delivered", "processing", "shipped"]

    def test_sample_order_totals_and_users(self):
        seed_database()

        john = current_domain.repository_for(User).find_by_email("john.doe@example.com")
        [order] = queries.list_orders(user_id=john.id)
        # Premium Training Program + 2 x Nutrition Guide Book
        assert order["total"] == 299.97
        assert order["user"]["name"] == "John Doe"
        assert order["shipping_address"]["city"] == "New York"

    def test_sample_orders_leave_stock_untouched(self):
        seed_database()

        kettlebells = current_domain.repository_for(Product).find_by_name("Kettlebell Set (3-Piece)")
        assert kettlebells.stock == 25

    def test_admin_role(self):
        seed_database()
        admin = current_domain.repository_for(User).find_by_email(data.ADMIN_EMAIL)
        assert admin.role == "admin"

    def test_featured_products(self):
        seed_database()
        featured = current_domain.repository_for(Product).find_filtered(featured=True)
        assert len(featured) == 5
