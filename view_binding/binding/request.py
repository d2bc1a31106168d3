"""Per-template context handed to every binder."""

from dataclasses import dataclass, field

from view_binding.models.templates import MasterName, Template
from view_binding.protocols import BindingLogger, TypeCatalog


@dataclass(frozen=True)
class BindRequest:
    """Context for one template's pass through the binder chain.

    Built fresh for each template and discarded afterwards. Binders read it
    and mutate ``target.descriptor``; they never modify the request.

    Attributes:
        target: Template being bound
        master: Master page selection declared by the template
        view_model_type: Full name of the declared view model type, if any
        namespaces: Namespaces imported by the template
        templates: Every discovered template, read-only during the pass
        types: Catalog used to resolve the view model type
        logger: Sink for binder diagnostics
    """

    target: Template
    types: TypeCatalog
    logger: BindingLogger
    master: MasterName = field(default_factory=MasterName.default)
    view_model_type: str | None = None
    namespaces: tuple[str, ...] = ()
    templates: tuple[Template, ...] = ()
