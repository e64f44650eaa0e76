"""Product API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProductApiError -> structured JSON responses
    - Middleware stack is an explicit ordered list (api/middleware.py)
    - Database connected on startup via lifespan; a failed connect is logged and the
      process keeps serving (degraded), it never exits
    - OpenAPI document built once from route annotations, Swagger UI served at /docs

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(settings) factory plus a module-level app: uvicorn imports `app`,
      tests can build an app with their own settings
    - The settings the app was built with live on app.state; request-time
      dependencies read them from there, never from the process-wide cache
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from product_api.api.error_handlers import register_error_handlers
from product_api.api.middleware import build_middleware
from product_api.api.routes import health, products
from product_api.config import Settings, get_settings
from product_api.infrastructure.database import connect_db, init_db
from product_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.database_echo,
        )
        await connect_db(manager)
        app.openapi()  # built once, cached on app.openapi_schema
        logger.info("Product API started")
        yield
        await manager.dispose()
        logger.info("Product API shutting down")

    app = FastAPI(
        title="Product REST API",
        description="REST API for managing products: name, price and availability",
        version="1.0.0",
        lifespan=lifespan,
        middleware=build_middleware(settings),
        docs_url="/docs",
        openapi_url="/docs.json",
        redoc_url=None,
        openapi_tags=[
            {"name": "products", "description": "API operations related to products"},
            {"name": "health", "description": "Liveness and readiness probes"},
        ],
        swagger_ui_parameters={"defaultModelsExpandDepth": -1},
    )
    app.state.settings = settings

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(products.router)

    register_error_handlers(app)
    return app


app = create_app()
