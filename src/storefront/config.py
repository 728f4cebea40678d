"""Application settings.

Settings are a frozen, versioned value assembled once from environment
variables. Nothing is fetched from the network or evaluated at runtime.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

SETTINGS_VERSION = "1"


@dataclass(frozen=True)
class Settings:
    version: str = SETTINGS_VERSION
    api_prefix: str = "/api"
    cors_origins: tuple[str, ...] = ("*",)
    api_base_url: str = "http://localhost:8000"
    request_timeout: float = 10.0
    cart_storage_key: str = "shopping_cart"
    cart_storage_path: str = ".storefront/local_storage.json"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``STOREFRONT_*`` environment variables over the defaults."""
    env = os.environ if environ is None else environ
    defaults = Settings()

    origins = env.get("STOREFRONT_CORS_ORIGINS")
    return Settings(
        api_prefix=env.get("STOREFRONT_API_PREFIX", defaults.api_prefix),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) if origins else defaults.cors_origins,
        api_base_url=env.get("STOREFRONT_API_URL", defaults.api_base_url),
        request_timeout=float(env.get("STOREFRONT_REQUEST_TIMEOUT", defaults.request_timeout)),
        cart_storage_key=env.get("STOREFRONT_CART_KEY", defaults.cart_storage_key),
        cart_storage_path=env.get("STOREFRONT_CART_PATH", defaults.cart_storage_path),
    )
