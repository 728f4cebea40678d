"""HTTP client for the storefront REST API.

Every endpoint answers with a ``{success, data, message}`` envelope. The
client unwraps ``data`` on success and raises ``ApiError`` otherwise, with a
message fit to show the shopper.
"""

import httpx

from storefront.config import Settings
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Please check your connection."

_STATUS_MESSAGES = {
    400: "Invalid request. Please check your input.",
    401: "Unauthorized. Please log in.",
    403: "Access forbidden.",
    404: "Resource not found.",
    409: "This resource already exists.",
    422: "Validation error. Please check your input.",
    500: "Server error. Please try again later.",
    503: "Service unavailable. Please try again later.",
}
_DEFAULT_MESSAGE = "An unexpected error occurred."


class ApiError(Exception):
    """A failed API call; ``status_code`` is None when the server was never reached."""

    def __init__(self, status_code: int | None, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return _STATUS_MESSAGES.get(response.status_code, _DEFAULT_MESSAGE)


class StorefrontClient:
    def __init__(self, http: httpx.Client, prefix: str = "/api"):
        self.http = http
        self.prefix = prefix.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "StorefrontClient":
        http = httpx.Client(base_url=settings.api_base_url, timeout=settings.request_timeout)
        return cls(http, prefix=settings.api_prefix)

    def close(self) -> None:
        self.http.close()

    def _request(self, method: str, path: str, **kwargs):
        try:
            response = self.http.request(method, f"{self.prefix}{path}", **kwargs)
        except httpx.TransportError as exc:
            logger.warning("api_unreachable", method=method, path=path, error=str(exc))
            raise ApiError(None, NETWORK_ERROR_MESSAGE) from exc

        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))

        try:
            body = response.json()
        except ValueError as exc:
            raise ApiError(response.status_code, _DEFAULT_MESSAGE) from exc
        if not body.get("success", False):
            raise ApiError(response.status_code, body.get("message") or _DEFAULT_MESSAGE)
        return body.get("data")

    # --- Seeding ---

    def initialize_database(self) -> dict:
        return self._request("POST", "/init")

    # --- Products ---

    def get_products(self, category=None, featured=None, search=None) -> list[dict]:
        params = {}
        if category:
            params["category"] = category
        if featured is not None:
            params["featured"] = "true" if featured else "false"
        if search:
            params["search"] = search
        return self._request("GET", "/products", params=params)

    def get_product(self, product_id: str) -> dict:
        return self._request("GET", f"/products/{product_id}")

    # --- Users ---

    def get_users(self) -> list[dict]:
        return self._request("GET", "/users")

    def get_user(self, user_id: str) -> dict:
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, email: str, name: str, role: str | None = None) -> dict:
        body = {"email": email, "name": name}
        if role:
            body["role"] = role
        return self._request("POST", "/users", json=body)

    def resolve_user(self, email: str, name: str) -> dict:
        return self._request("POST", "/users/resolve", json={"email": email, "name": name})

    # --- Orders ---

    def get_orders(self, user_id=None, status=None) -> list[dict]:
        params = {}
        if user_id:
            params["userId"] = user_id
        if status:
            params["status"] = status
        return self._request("GET", "/orders", params=params)

    def get_order(self, order_id: str) -> dict:
        return self._request("GET", f"/orders/{order_id}")

    def create_order(self, user_id: str, items: list[dict], shipping_address: dict) -> dict:
        return self._request(
            "POST",
            "/orders",
            json={"userId": user_id, "items": items, "shippingAddress": shipping_address},
        )

    def update_order_status(self, order_id: str, status: str) -> dict:
        return self._request("PATCH", f"/orders/{order_id}/status", json={"status": status})
