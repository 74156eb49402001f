# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the EventsHub API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import EventsHubException, eventshub_exception_handler
from app.routers import admin, builder, cart, catalog, health, planner

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs the runtime configuration on startup and a message on shutdown.
    """
    logger.info(f"Starting EventsHub API in {settings.ENVIRONMENT} mode")
    logger.info(f"Catalog source: {settings.CATALOG_SOURCE}")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down EventsHub API")


# Create FastAPI application
app = FastAPI(
    title="EventsHub API",
    description="""
## Event Marketplace API

Browse event vendors and services, and let the event builder propose
budget-tiered packages.

### How It Works

1. **Pick the basics** - Event type, theme, colours, guest count, venue, budget
2. **Generate packages** - Essential, Standard and Premium proposals
3. **Price the cart** - Subtotal, discount code, service fee and grand total

### Quick Start

```bash
# 1. Builder options
curl http://localhost:8000/api/v1/builder/options

# 2. Generate packages
curl -X POST http://localhost:8000/api/v1/builder/packages \\
  -H "Content-Type: application/json" \\
  -d '{"event_type_id": "wedding", "guest_size_id": "medium", "budget_id": "moderate"}'

# 3. Price a cart
curl -X POST http://localhost:8000/api/v1/cart/summary \\
  -H "Content-Type: application/json" \\
  -d '{"items": [{"service_id": "s1", "quantity": 1}]}'
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Catalog",
            "description": "Categories, vendors and services",
        },
        {
            "name": "Builder",
            "description": "Event builder options and package generation",
        },
        {
            "name": "Planner",
            "description": "Turn an event description into builder selections",
        },
        {
            "name": "Cart",
            "description": "Cart pricing",
        },
        {
            "name": "Admin",
            "description": "Catalog back-office (requires X-Admin-Key)",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(EventsHubException)
async def handle_eventshub_exception(request: Request, exc: EventsHubException):
    """Handle custom EventsHub exceptions."""
    return await eventshub_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Catalog endpoints
app.include_router(
    catalog.router,
    prefix="/api/v1/catalog",
    tags=["Catalog"]
)

# Event builder endpoints
app.include_router(
    builder.router,
    prefix="/api/v1/builder",
    tags=["Builder"]
)

# Planner endpoints
app.include_router(
    planner.router,
    prefix="/api/v1/planner",
    tags=["Planner"]
)

# Cart endpoints
app.include_router(
    cart.router,
    prefix="/api/v1/cart",
    tags=["Cart"]
)

# Admin endpoints
app.include_router(
    admin.router,
    prefix="/api/v1/admin",
    tags=["Admin"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "EventsHub API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )
