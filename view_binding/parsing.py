"""Extraction of binding directives declared inside spark views.

Views declare their configuration inline::

    <viewdata model="app.models.HomeViewModel" />
    <use master="Site" />
    <use namespace="app.helpers" />
"""

import re

from pydantic import BaseModel, Field

from view_binding.models.templates import Template

_ATTRIBUTE = r"""\b{name}\s*=\s*(?:"([^"]*)"|'([^']*)')"""

VIEWDATA_MODEL = re.compile(r"<viewdata\b[^>]*?" + _ATTRIBUTE.format(name="model"), re.IGNORECASE)
USE_MASTER = re.compile(r"<use\b[^>]*?" + _ATTRIBUTE.format(name="master"), re.IGNORECASE)
USE_NAMESPACE = re.compile(r"<use\b[^>]*?" + _ATTRIBUTE.format(name="namespace"), re.IGNORECASE)


class TemplateDirectives(BaseModel):
    """Binding configuration declared by one template."""

    view_model_type: str | None = Field(default=None, description="Full name of the view model type")
    master: str | None = Field(default=None, description="Raw master attribute; empty string means no master")
    namespaces: list[str] = Field(default_factory=list, description="Namespaces imported by the view")


def _value(match: re.Match) -> str:
    return match.group(1) if match.group(1) is not None else match.group(2)


def parse_directives(source: str) -> TemplateDirectives:
    """Parse directives from template markup.

    The first model and the first master declaration win; namespaces
    accumulate in document order without duplicates.
    """
    model = VIEWDATA_MODEL.search(source)
    master = USE_MASTER.search(source)

    namespaces: list[str] = []
    for match in USE_NAMESPACE.finditer(source):
        namespace = _value(match).strip()
        if namespace and namespace not in namespaces:
            namespaces.append(namespace)

    return TemplateDirectives(
        view_model_type=_value(model).strip() or None if model else None,
        master=_value(master) if master else None,
        namespaces=namespaces,
    )


def load_directives(template: Template) -> TemplateDirectives:
    """Read and parse a template's directives.

    Only spark views are read; other templates carry no directives. I/O
    errors propagate to the caller.
    """
    if not template.is_spark_view():
        return TemplateDirectives()
    return parse_directives(template.file_path.read_text(encoding="utf-8"))
