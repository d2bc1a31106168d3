"""Read-only diagnostics over resolved view metadata."""

from fastapi import APIRouter, Depends

from view_binding.catalog import ViewCatalog
from view_binding.dependencies import get_history, get_view_catalog
from view_binding.history import DiagnosticHistory
from view_binding.models import BindingReport, ErrorResponse, ViewSummary

router = APIRouter()


@router.get("/views", response_model=list[ViewSummary])
async def list_views(catalog: ViewCatalog = Depends(get_view_catalog)):
    """List every bound view with its master, view model and binding files."""
    return [ViewSummary.from_template(template) for template in catalog.views()]


@router.get(
    "/views/{relative_path:path}",
    response_model=ViewSummary,
    responses={404: {"model": ErrorResponse, "description": "No bound view at that path"}},
)
async def get_view(relative_path: str, catalog: ViewCatalog = Depends(get_view_catalog)):
    """Resolved metadata of one view, addressed by its path under the template root."""
    return ViewSummary.from_template(catalog.get(relative_path))


@router.get("/history", response_model=list[BindingReport])
async def recent_reports(history: DiagnosticHistory = Depends(get_history)):
    """Most recent binding reports, oldest first."""
    return history.recent_reports()
