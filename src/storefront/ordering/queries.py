"""Order reads with the ordering user's contact details attached."""

from protean.utils.globals import current_domain

from storefront.identity.user import User
from storefront.ordering.order import Order


def _user_summary(user):
    if user is None:
        return None
    return {"id": str(user.id), "name": user.name, "email": user.email}


def order_details(order, user=None):
    """Flatten an order (and optionally its user) into a plain dict."""
    address = order.shipping_address
    return {
        "id": str(order.id),
        "user_id": str(order.user_id),
        "user": _user_summary(user),
        "items": [
            {
                "product_id": str(item.product_id),
                "name": item.name,
                "price": item.price,
                "quantity": item.quantity,
            }
            for item in order.items
        ],
        "total": order.total,
        "status": order.status,
        "shipping_address": {
            "street": address.street,
            "city": address.city,
            "state": address.state,
            "zip_code": address.zip_code,
            "country": address.country,
        }
        if address
        else None,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


def _find_user(user_id):
    return current_domain.repository_for(User).find_by_id(user_id)


def get_order(order_id) -> dict:
    order = current_domain.repository_for(Order).get_order(order_id)
    return order_details(order, _find_user(order.user_id))


def list_orders(user_id=None, status=None) -> list[dict]:
    """Orders filtered by user and/or status, newest first."""
    orders = current_domain.repository_for(Order).find_filtered(user_id=user_id, status=status)

    users = {}
    results = []
    for order in orders:
        key = str(order.user_id)
        if key not in users:
            users[key] = _find_user(key)
        results.append(order_details(order, users[key]))
    return results
