"""View binding models"""

from view_binding.models.diagnostics import BindingReport, ErrorResponse, HealthResponse, ViewSummary
from view_binding.models.templates import MasterName, MasterSelection, Template, ViewDescriptor

__all__ = [
    "BindingReport",
    "ErrorResponse",
    "HealthResponse",
    "MasterName",
    "MasterSelection",
    "Template",
    "ViewDescriptor",
    "ViewSummary",
]
