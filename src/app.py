"""Storefront FastAPI application.

Serves the catalogue, users, orders and database seeding under one API
prefix. Every API request runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay from domain.toml:
#   - unset        → in-memory database
#   - "production" → PostgreSQL at DATABASE_URL
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.config import load_settings
from storefront.domain import storefront
from storefront.utils.logging import add_context, clear_context

storefront.init()

settings = load_settings()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Products, users and orders for the storefront",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context for API requests."""
    if request.url.path.startswith(settings.api_prefix):
        clear_context()
        add_context(method=request.method, path=request.url.path)
        with storefront.domain_context():
            response = await call_next(request)
        return response
    # Docs and OpenAPI schema need no domain
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers and error handling
# ---------------------------------------------------------------------------
from storefront.api import (  # noqa: E402
    init_router,
    order_router,
    product_router,
    register_error_handlers,
    user_router,
)

for router in (init_router, product_router, user_router, order_router):
    app.include_router(router, prefix=settings.api_prefix)

register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get(f"{settings.api_prefix}/health")
async def health():
    return JSONResponse(
        content={
            "success": True,
            "data": {"status": "ok", "domain": storefront.name, "settingsVersion": settings.version},
        }
    )
