"""
wooinbox API - Main FastAPI Application.

Serves WooCommerce order lookups to the support-inbox sidebar.
"""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wooinbox.errors import ConfigurationError, NotFoundError, TransportError
from wooinbox.utils.logging import setup_logging

# Load environment variables
load_dotenv()

# Configure logging early
setup_logging("wooinbox-api")

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info("Starting wooinbox API")
    logger.info(
        "Store: %s", os.getenv("WOOCOMMERCE_SITE_URL") or "not configured"
    )

    yield

    logger.info("Shutting down wooinbox API")


# OpenAPI tag descriptions (shown in /docs and /openapi.json)
OPENAPI_TAGS = [
    {
        "name": "orders",
        "description": "Order search and detail endpoints with derived tracking",
    },
    {
        "name": "store",
        "description": "Store connectivity checks",
    },
    {
        "name": "system",
        "description": "System health and information endpoints",
    },
]

app = FastAPI(
    title="wooinbox API",
    description=(
        "WooCommerce order lookup for support inboxes.\n\n"
        "Search orders by customer email or order id and view order details "
        "with tracking information parsed from order notes."
    ),
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=OPENAPI_TAGS,
)

# The sidebar is served from the inbox host's origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ALLOW_ORIGINS", "*").split(","),
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("Store not configured: %s", exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(TransportError)
async def transport_error_handler(request: Request, exc: TransportError):
    logger.warning("Store API request failed: %s", exc)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Store API error: {exc}", "upstream_status": exc.status_code},
    )


@app.get("/", tags=["system"], operation_id="getServiceInfo")
async def root():
    """Return basic information about the API service."""
    return {
        "service": "wooinbox API",
        "version": "0.1.0",
        "status": "operational",
        "description": "WooCommerce order lookup for support inboxes",
    }


@app.get("/health", tags=["system"], operation_id="healthCheck")
async def health_check():
    """Check service health status."""
    return {
        "status": "healthy",
        "service": "wooinbox-api",
        "environment": os.getenv("K_SERVICE", "local"),
    }


# Import and include routers
from wooinbox.api.routes import orders, store

app.include_router(orders.router, prefix="/api/v1", tags=["orders"])
app.include_router(store.router, prefix="/api/v1", tags=["store"])
