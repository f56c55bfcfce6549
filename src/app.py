"""Storefront FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV selects the config overlay from domain.toml.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from identity.domain import identity
from identity.utils.logging import bind_request_context, clear_request_context
from ordering.domain import ordering

identity.init()
ordering.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/customers": identity,
    "/cart": ordering,
    "/discounts": ordering,
    "/checkout": ordering,
    "/orders": ordering,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path == prefix or path.startswith(prefix + "/"):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Storefront — customer accounts, cart, discounts, checkout and orders",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    clear_request_context()
    bind_request_context(
        method=request.method,
        path=request.url.path,
        customer_id=request.headers.get("x-customer-id"),
    )

    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match: health check and docs
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers and error mapping
# ---------------------------------------------------------------------------
from identity.api import router as identity_router  # noqa: E402
from ordering.api import cart_router, checkout_router, discount_router, order_router  # noqa: E402
from shared.http import register_exception_handlers  # noqa: E402

app.include_router(identity_router)
app.include_router(cart_router)
app.include_router(discount_router)
app.include_router(checkout_router)
app.include_router(order_router)

register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "identity": {"name": identity.name},
                "ordering": {"name": ordering.name},
            },
        }
    )
