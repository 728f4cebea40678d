"""Pydantic request/response schemas for the storefront API.

Bodies travel in camelCase; Python attributes stay snake_case.
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Envelope(CamelModel, Generic[T]):
    success: bool = True
    data: T | None = None
    message: str | None = None


# --- Products ---


class ProductResponse(CamelModel):
    id: str
    name: str
    description: str | None = None
    price: float
    category: str
    image_url: str | None = None
    stock: int
    featured: bool
    created_at: datetime | None = None


# --- Users ---


class UserResponse(CamelModel):
    id: str
    email: str
    name: str
    role: str
    created_at: datetime | None = None


class CreateUserRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"email": "jane.smith@example.com", "name": "Jane Smith", "role": "customer"}]}
    )

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    role: str | None = Field(None, max_length=20)


class ResolveUserRequest(CamelModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)


# --- Orders ---


class OrderItemRequest(CamelModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)


class ShippingAddressSchema(CamelModel):
    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zip_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)


class CreateOrderRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "userId": "a3c1e2b4-0000-4000-8000-000000000001",
                    "items": [{"productId": "b7d9f1a2-0000-4000-8000-000000000002", "quantity": 2}],
                    "shippingAddress": {
                        "street": "123 Main Street",
                        "city": "New York",
                        "state": "NY",
                        "zipCode": "10001",
                        "country": "USA",
                    },
                }
            ]
        }
    )

    user_id: str = Field(..., min_length=1)
    items: list[OrderItemRequest] = Field(..., min_length=1)
    shipping_address: ShippingAddressSchema


class UpdateStatusRequest(CamelModel):
    status: str = Field(..., min_length=1, max_length=50)


class OrderItemResponse(CamelModel):
    product_id: str
    name: str
    price: float
    quantity: int


class OrderUserResponse(CamelModel):
    id: str
    name: str
    email: str


class OrderResponse(CamelModel):
    id: str
    user_id: str
    user: OrderUserResponse | None = None
    items: list[OrderItemResponse]
    total: float
    status: str
    shipping_address: ShippingAddressSchema | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# --- Seeding ---


class SeedResponse(CamelModel):
    products: int
    users: int
    orders: int
