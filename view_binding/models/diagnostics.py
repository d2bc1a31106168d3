"""Pydantic models for diagnostic reports and responses."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from view_binding.models.templates import Template
from view_binding.type_catalog import full_name


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str


class ViewSummary(BaseModel):
    """Resolved metadata of one template, flattened for display."""

    path: str = Field(..., description="Template path relative to the template root")
    name: str = Field(..., description="Logical template name")
    is_view: bool = Field(..., description="Whether a view descriptor was bound")
    master: str | None = Field(default=None, description="Relative path of the resolved master page")
    view_model: str | None = Field(default=None, description="Full name of the resolved view model type")
    bindings: list[str] = Field(default_factory=list, description="Relative paths of applicable binding files")

    @classmethod
    def from_template(cls, template: Template) -> "ViewSummary":
        descriptor = template.descriptor
        if descriptor is None:
            return cls(path=template.relative_path, name=template.name, is_view=False)

        return cls(
            path=template.relative_path,
            name=template.name,
            is_view=True,
            master=descriptor.master.relative_path if descriptor.master else None,
            view_model=full_name(descriptor.view_model) if descriptor.view_model else None,
            bindings=[binding.relative_path for binding in descriptor.bindings],
        )


class BindingReport(ViewSummary):
    """Outcome of one template's binding pass, kept in the diagnostic history."""

    messages: list[str] = Field(default_factory=list, description="Binder trace messages in emission order")
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), description="When the pass finished")

    @classmethod
    def for_pass(cls, template: Template, messages: list[str]) -> "BindingReport":
        summary = ViewSummary.from_template(template)
        return cls(**summary.model_dump(), messages=list(messages))


class ErrorResponse(BaseModel):
    """Error response."""

    code: str
    message: str
    details: dict = Field(default_factory=dict)
