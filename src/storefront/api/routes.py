"""FastAPI endpoints for the storefront."""

import json

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    CreateOrderRequest,
    CreateUserRequest,
    Envelope,
    OrderResponse,
    ProductResponse,
    ResolveUserRequest,
    SeedResponse,
    UpdateStatusRequest,
    UserResponse,
)
from storefront.catalogue import reader
from storefront.identity.registration import RegisterUser
from storefront.identity.resolution import resolve_user
from storefront.identity.user import User
from storefront.ordering import queries
from storefront.ordering.placement import PlaceOrder
from storefront.ordering.status import UpdateOrderStatus
from storefront.seeding.seed import seed_database

init_router = APIRouter(prefix="/init", tags=["init"])
product_router = APIRouter(prefix="/products", tags=["products"])
user_router = APIRouter(prefix="/users", tags=["users"])
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _product(product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        category=product.category,
        image_url=product.image_url,
        stock=product.stock,
        featured=product.featured,
        created_at=product.created_at,
    )


def _user(user) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        email=user.email,
        name=user.name,
        role=user.role,
        created_at=user.created_at,
    )


# --- Seeding ---


@init_router.post("", response_model=Envelope[SeedResponse])
async def initialize_database() -> Envelope[SeedResponse]:
    result = seed_database()
    return Envelope(
        data=SeedResponse(products=result.products, users=result.users, orders=result.orders),
        message=result.message,
    )


# --- Products ---


@product_router.get("", response_model=Envelope[list[ProductResponse]])
async def list_products(
    category: str | None = None,
    featured: bool | None = None,
    search: str | None = None,
) -> Envelope[list[ProductResponse]]:
    products = reader.list_products(category=category, featured=featured, search=search)
    return Envelope(data=[_product(p) for p in products])


@product_router.get("/{product_id}", response_model=Envelope[ProductResponse])
async def get_product(product_id: str) -> Envelope[ProductResponse]:
    return Envelope(data=_product(reader.get_product(product_id)))


# --- Users ---


@user_router.get("", response_model=Envelope[list[UserResponse]])
async def list_users() -> Envelope[list[UserResponse]]:
    users = current_domain.repository_for(User).list_all()
    return Envelope(data=[_user(u) for u in users])


@user_router.get("/{user_id}", response_model=Envelope[UserResponse])
async def get_user(user_id: str) -> Envelope[UserResponse]:
    return Envelope(data=_user(current_domain.repository_for(User).get_user(user_id)))


@user_router.post("", status_code=201, response_model=Envelope[UserResponse])
async def create_user(body: CreateUserRequest) -> Envelope[UserResponse]:
    fields = {"email": body.email, "name": body.name}
    if body.role:
        fields["role"] = body.role
    user_id = current_domain.process(RegisterUser(**fields), asynchronous=False)
    return Envelope(data=_user(current_domain.repository_for(User).get_user(user_id)))


@user_router.post("/resolve", response_model=Envelope[UserResponse])
async def resolve(body: ResolveUserRequest) -> Envelope[UserResponse]:
    user_id = resolve_user(body.email, body.name)
    return Envelope(data=_user(current_domain.repository_for(User).get_user(user_id)))


# --- Orders ---


@order_router.get("", response_model=Envelope[list[OrderResponse]])
async def list_orders(
    user_id: str | None = Query(None, alias="userId"),
    status: str | None = None,
) -> Envelope[list[OrderResponse]]:
    orders = queries.list_orders(user_id=user_id, status=status)
    return Envelope(data=[OrderResponse.model_validate(o) for o in orders])


@order_router.get("/{order_id}", response_model=Envelope[OrderResponse])
async def get_order(order_id: str) -> Envelope[OrderResponse]:
    return Envelope(data=OrderResponse.model_validate(queries.get_order(order_id)))


@order_router.post("", status_code=201, response_model=Envelope[OrderResponse])
async def create_order(body: CreateOrderRequest) -> Envelope[OrderResponse]:
    command = PlaceOrder(
        user_id=body.user_id,
        items=json.dumps([{"product_id": item.product_id, "quantity": item.quantity} for item in body.items]),
        shipping_address=json.dumps(body.shipping_address.model_dump()),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return Envelope(
        data=OrderResponse.model_validate(queries.get_order(order_id)),
        message="Order created successfully",
    )


@order_router.patch("/{order_id}/status", response_model=Envelope[OrderResponse])
async def update_order_status(order_id: str, body: UpdateStatusRequest) -> Envelope[OrderResponse]:
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return Envelope(data=OrderResponse.model_validate(queries.get_order(order_id)))
