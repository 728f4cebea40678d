"""Read-only access to the catalogue."""

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product


def list_products(category=None, featured=None, search=None) -> list[Product]:
    """List products, optionally narrowed by category, featured flag and a search term.

    The search term matches product name or description, ignoring case.
    """
    products = current_domain.repository_for(Product).find_filtered(category=category, featured=featured)

    if search and search.strip():
        term = search.strip().lower()
        products = [
            p for p in products if term in (p.name or "").lower() or term in (p.description or "").lower()
        ]
    return products


def get_product(product_id) -> Product:
    return current_domain.repository_for(Product).get_product(product_id)
