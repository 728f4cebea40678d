import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before any storefront module builds the domain."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(scope="session")
def _storefront_domain():
    """Initialize the storefront domain once per session."""
    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Shared builders
# ---------------------------------------------------------------------------
SHIPPING_ADDRESS = {
    "street": "123 Main Street",
    "city": "New York",
    "state": "NY",
    "zip_code": "10001",
    "country": "USA",
}


@pytest.fixture()
def shipping_address():
    return dict(SHIPPING_ADDRESS)


@pytest.fixture()
def add_product():
    from protean import current_domain
    from storefront.catalogue.product import Product

    def _add(name="Foam Roller", price=10.0, stock=10, category="equipment", **extra):
        product = Product.add(name=name, price=price, category=category, stock=stock, **extra)
        current_domain.repository_for(Product).add(product)
        return product

    return _add


@pytest.fixture()
def add_user():
    from protean import current_domain
    from storefront.identity.user import User

    def _add(email="john.doe@example.com", name="John Doe", role="customer"):
        user = User.register(email=email, name=name, role=role)
        current_domain.repository_for(User).add(user)
        return user

    return _add


@pytest.fixture()
def api_app():
    from fastapi import FastAPI
    from storefront.api import init_router, order_router, product_router, register_error_handlers, user_router

    app = FastAPI()
    for router in (init_router, product_router, user_router, order_router):
        app.include_router(router, prefix="/api")
    register_error_handlers(app)
    return app


@pytest.fixture()
def api(api_app):
    from fastapi.testclient import TestClient

    return TestClient(api_app)


@pytest.fixture()
def storefront_client(api):
    from storefront.client.api import StorefrontClient

    return StorefrontClient(api)
