"""PC Store FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request runs inside the ``pcstore`` domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay from domain.toml is applied.
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pcstore.domain import store
from pcstore.utils.logging import add_context, clear_context

store.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="PC Store API",
    description="PC components store: catalogue, identity, carts and orders",
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
    """Push the Protean domain context for each request."""
    add_context(request_id=uuid4().hex, method=request.method, path=request.url.path)
    try:
        with store.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from pcstore.api.catalogue import category_router, manufacturer_router, product_router  # noqa: E402
from pcstore.api.identity import auth_router, user_router  # noqa: E402
from pcstore.api.ordering import cart_item_router, order_router  # noqa: E402

app.include_router(auth_router)
app.include_router(user_router)
app.include_router(category_router)
app.include_router(manufacturer_router)
app.include_router(product_router)
app.include_router(cart_item_router)
app.include_router(order_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": {"name": store.name}})
