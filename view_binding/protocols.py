"""Protocol definitions for the collaborators the binder chain consumes."""

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from view_binding.models.templates import Template

if TYPE_CHECKING:
    from view_binding.binding.request import BindRequest


class TypeCatalog(Protocol):
    """Name-to-type lookup for view model types."""

    def types_with_full_name(self, name: str) -> Sequence[type]:
        """Return every type whose full name equals ``name`` (zero, one or many)."""
        ...


class SharedTemplateLocator(Protocol):
    """Finds a named master template reachable from a target template."""

    def locate_template(self, name: str, target: Template, templates: Sequence[Template]) -> Template | None:
        """Return the matching template or None when nothing is reachable."""
        ...


class ReachableDirectoryLocator(Protocol):
    """Computes the directories reachable from a target template."""

    def get_directories(self, target: Template, templates: Sequence[Template]) -> Sequence[Path]:
        ...


class BindingLogger(Protocol):
    """Diagnostic sink for binder messages.

    Implementations must never raise.
    """

    def log(self, template: Template, message: str, *args: Any) -> None:
        ...


class TemplateBinder(Protocol):
    """One step of the binder chain."""

    def can_bind(self, request: "BindRequest") -> bool:
        """Whether this binder applies to the request's target."""
        ...

    def bind(self, request: "BindRequest") -> None:
        """Contribute this binder's piece of metadata to the target's descriptor."""
        ...
