from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool

from catalog_lite.entrypoints.http.dependencies import get_item_repository
from catalog_lite.entrypoints.http.exception_handlers import register_exception_handlers
from catalog_lite.entrypoints.http.routes.health import router as health_router
from catalog_lite.entrypoints.http.routes.items import router as items_router
from catalog_lite.infra.config import catalog_preload, configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Optional eager load, kept off the event loop
    if catalog_preload():
        await run_in_threadpool(get_item_repository().warm_up)
    yield


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Catalog Lite API",
        description="""
        Read-only product catalog API for looking up and searching items.

        ## Features
        - Get item details by ID
        - Search items by text and category
        - Paginated results

        ## Authentication
        No authentication required (read-only public catalog).

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
        contact={
            "name": "Catalog Lite Team",
            "email": "dev@catalog-lite.dev",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(items_router, prefix="/api")

    return app


app = build_app()
