"""Checkout: turn the cart and a shipping form into a placed order."""

import re
from dataclasses import dataclass

from storefront.cart.cart import CartStore
from storefront.client.api import ApiError, StorefrontClient
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
ZIP_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")


@dataclass
class CheckoutForm:
    name: str = ""
    email: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = "USA"

    def validate(self) -> dict[str, str]:
        """Return field name -> error message for every invalid field."""
        errors = {}
        if not self.name.strip():
            errors["name"] = "Name is required"
        if not self.email.strip():
            errors["email"] = "Email is required"
        elif not EMAIL_PATTERN.match(self.email.strip()):
            errors["email"] = "Invalid email format"
        if not self.street.strip():
            errors["street"] = "Street address is required"
        if not self.city.strip():
            errors["city"] = "City is required"
        if not self.state.strip():
            errors["state"] = "State is required"
        if not self.zip_code.strip():
            errors["zip_code"] = "ZIP code is required"
        elif not ZIP_PATTERN.match(self.zip_code.strip()):
            errors["zip_code"] = "Invalid ZIP code format"
        if not self.country.strip():
            errors["country"] = "Country is required"
        return errors

    def shipping_address(self) -> dict:
        return {
            "street": self.street.strip(),
            "city": self.city.strip(),
            "state": self.state.strip(),
            "zipCode": self.zip_code.strip(),
            "country": self.country.strip(),
        }


class CheckoutError(Exception):
    def __init__(self, message: str, field_errors: dict[str, str] | None = None):
        super().__init__(message)
        self.message = message
        self.field_errors = field_errors or {}


class Checkout:
    def __init__(self, cart: CartStore, client: StorefrontClient):
        self.cart = cart
        self.client = client

    def place_order(self, form: CheckoutForm) -> dict:
        """Place an order for the cart's contents and empty the cart.

        The cart is only cleared once the server has accepted the order, so a
        failed attempt can be retried as is.
        """
        if not self.cart.items:
            raise CheckoutError("Your cart is empty")

        field_errors = form.validate()
        if field_errors:
            raise CheckoutError("Please fix the errors in the form", field_errors)

        try:
            user = self.client.resolve_user(form.email.strip(), form.name.strip())
            order = self.client.create_order(
                user_id=user["id"],
                items=[{"productId": item.product_id, "quantity": item.quantity} for item in self.cart.items],
                shipping_address=form.shipping_address(),
            )
        except ApiError as exc:
            logger.warning("checkout_failed", status_code=exc.status_code, error=exc.message)
            raise CheckoutError(exc.message) from exc

        self.cart.clear_cart()
        logger.info("checkout_completed", order_id=order["id"], total=order["total"])
        return order
