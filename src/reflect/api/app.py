"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reflect.api.error_handlers import register_error_handlers
from reflect.config import get_settings


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Reflect API",
        description="Stablecoin quote and transaction API",
        version="0.1.0",
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Register routes
    from reflect.api.routes import health
    from reflect.web.controllers import integrations_router, stablecoins_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(stablecoins_router)
    app.include_router(integrations_router)

    return app
