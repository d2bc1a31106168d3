"""FastAPI dependencies for the diagnostics routes."""

from fastapi import Request

from view_binding.catalog import ViewCatalog
from view_binding.history import DiagnosticHistory


async def get_view_catalog(request: Request) -> ViewCatalog:
    """
    Get the resolved view catalog from app state.

    Raises:
        RuntimeError: If views have not been resolved yet.
    """
    catalog: ViewCatalog | None = getattr(request.app.state, "view_catalog", None)

    if catalog is None:
        raise RuntimeError("View catalog not initialized.")

    return catalog


async def get_history(request: Request) -> DiagnosticHistory:
    """
    Get the shared diagnostic history from app state.

    Raises:
        RuntimeError: If the history is not initialized.
    """
    history: DiagnosticHistory | None = getattr(request.app.state, "history", None)

    if history is None:
        raise RuntimeError("Diagnostic history not initialized.")

    return history
