"""Application factory for the view binding diagnostics app."""

from fastapi import FastAPI

from view_binding import __version__
from view_binding.config import Settings, get_settings
from view_binding.core.lifespan import create_lifespan
from view_binding.middleware.error_handlers import register_error_handlers
from view_binding.routers import diagnostics_router, health_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the diagnostics application.

    Views are resolved once during startup; the routes only read the result.

    Args:
        settings: Settings to use instead of the process-wide instance

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="View Binding Diagnostics",
        description="Resolved master pages, view models and binding files for every discovered view.",
        version=__version__,
        lifespan=create_lifespan(settings),
    )

    register_error_handlers(app)

    app.include_router(health_router.router, tags=["health"])
    app.include_router(diagnostics_router.router, prefix="/_diagnostics", tags=["diagnostics"])

    return app
