"""Stockroom FastAPI application.

Serves the stores, products and dashboard endpoints under the API prefix and
processes commands synchronously.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import time
import uuid
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stockroom.config import load_settings
from stockroom.domain import stockroom
from stockroom.utils.logging import add_context, clear_context

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the domain.toml overlay (memory by default, PostgreSQL
# for "production").
stockroom.init()

settings = load_settings()
_started_at = time.monotonic()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Stockroom API",
    description="Inventory management for stores and their products",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the stockroom domain context and bind request details to log events."""
    add_context(request_id=request.headers.get("x-request-id", str(uuid.uuid4())), path=request.url.path)
    try:
        with stockroom.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from stockroom.api import dashboard_router, product_router, store_router  # noqa: E402
from stockroom.api.errors import register_exception_handlers  # noqa: E402

register_exception_handlers(app)
app.include_router(store_router, prefix=settings.api_prefix)
app.include_router(product_router, prefix=settings.api_prefix)
app.include_router(dashboard_router, prefix=settings.api_prefix)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "uptime": round(time.monotonic() - _started_at, 3),
            "timestamp": datetime.now(UTC).isoformat(),
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
