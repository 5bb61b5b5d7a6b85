from __future__ import annotations

from fastapi import FastAPI

from car_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from car_catalog.entrypoints.http.middleware import register_middleware
from car_catalog.entrypoints.http.routes.cars import router as cars_router
from car_catalog.entrypoints.http.routes.home import router as home_router
from car_catalog.infra.catalog_loader import load_catalog
from car_catalog.infra.config import cors_origins
from car_catalog.ports.catalog_store import CatalogStore


def build_app(catalog_store: CatalogStore, allowed_origins: list[str] | None = None) -> FastAPI:
    """
    Build the HTTP application around an already loaded catalog store.

    The store is attached to ``app.state`` and injected into routes, so every
    app instance works on its own catalog.
    """
    app = FastAPI(
        title="Car Catalog API",
        description="""
        Read-mostly car catalog loaded from per-brand JSON files.

        ## Features
        - List all cars with pagination
        - List cars of one brand
        - Get a car by brand and id
        - Search by title, model, color and maximum price
        - Add cars (kept in memory only)

        ## Error Handling
        All errors return structured JSON responses with a message and an error code.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    app.state.catalog_store = catalog_store

    register_exception_handlers(app)
    register_middleware(
        app,
        cors_origins=allowed_origins if allowed_origins is not None else cors_origins(),
    )

    app.include_router(home_router)
    app.include_router(cars_router, prefix="/api/cars")

    return app


def create_app() -> FastAPI:
    """
    App factory for ``uvicorn --factory``: loads the catalog from configuration.

    Raises:
        LoadError: If the catalog cannot be loaded
    """
    return build_app(load_catalog())
