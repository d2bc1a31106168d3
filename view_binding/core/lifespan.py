"""Application lifespan management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from view_binding import __version__
from view_binding.binding import BinderPipeline
from view_binding.catalog import ViewCatalog
from view_binding.config import Settings
from view_binding.discovery import TemplateFinder
from view_binding.exceptions import TemplateRootNotFoundException
from view_binding.history import DiagnosticHistory
from view_binding.logging_config import get_logger, log_with_context
from view_binding.models.templates import Template
from view_binding.type_catalog import TypePool

logger = get_logger(__name__)


def resolve_views(settings: Settings, history: DiagnosticHistory) -> ViewCatalog:
    """Discover templates and run the binding pass once.

    A missing template root yields an empty catalog; any other discovery or
    type catalog failure propagates.
    """
    finder = TemplateFinder(settings.templates_root, view_extension=settings.view_extension)
    try:
        templates: list[Template] = finder.find()
    except TemplateRootNotFoundException as e:
        log_with_context(
            logger,
            "warning",
            "Template root not found, no views bound",
            error=e.message,
            event_type="templates_root_missing",
        )
        return ViewCatalog()

    types = TypePool()
    types.add_modules(settings.view_model_modules)

    pipeline = BinderPipeline.from_settings(settings, history=history)
    pipeline.bind_templates(templates, types, max_workers=settings.max_workers)
    return ViewCatalog(templates)


def create_lifespan(settings: Settings):
    """Build a lifespan that resolves views before the app serves anything."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log_with_context(
            logger,
            "info",
            "Starting view binding diagnostics",
            version=__version__,
            templates_root=str(settings.templates_root),
            event_type="app_startup",
        )

        app.state.history = DiagnosticHistory(settings.history_capacity)
        app.state.view_catalog = resolve_views(settings, app.state.history)

        log_with_context(
            logger,
            "info",
            "Views resolved",
            view_count=len(app.state.view_catalog),
            event_type="views_ready",
        )

        try:
            yield
        except Exception as e:
            log_with_context(
                logger,
                "error",
                "Application error during lifespan",
                error=str(e),
                error_type=type(e).__name__,
                event_type="app_error",
            )
            raise
        finally:
            log_with_context(
                logger,
                "info",
                "Shutting down view binding diagnostics",
                event_type="app_shutdown",
            )

    return lifespan
