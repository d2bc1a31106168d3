"""Orchestration of the binder chain over a discovered template set."""

from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from view_binding.binding.binders import (
    MasterPageBinder,
    ReachableBindingsBinder,
    ViewDescriptorBinder,
    ViewModelBinder,
)
from view_binding.binding.request import BindRequest
from view_binding.config import Settings
from view_binding.history import DiagnosticHistory
from view_binding.locators import ReachableDirectoryLocator, SharedTemplateLocator
from view_binding.logging_config import get_logger, log_with_context
from view_binding.models.diagnostics import BindingReport
from view_binding.models.templates import MasterName, Template
from view_binding.parsing import TemplateDirectives, load_directives
from view_binding.protocols import TemplateBinder, TypeCatalog
from view_binding.tracing import BindingTracer

logger = get_logger(__name__)

DirectiveSource = Callable[[Template], TemplateDirectives]


def default_binders() -> tuple[TemplateBinder, ...]:
    """The binder chain in its required order.

    ViewDescriptorBinder must come first: every later binder only applies to
    templates that already carry a descriptor.
    """
    return (
        ViewDescriptorBinder(),
        MasterPageBinder(),
        ViewModelBinder(),
        ReachableBindingsBinder(),
    )


class BinderPipeline:
    """Runs each template through the binder chain.

    Binders whose ``can_bind`` is false are skipped without side effects and
    never stop the chain. Partially bound templates are a valid outcome.
    """

    def __init__(
        self,
        binders: Sequence[TemplateBinder] | None = None,
        history: DiagnosticHistory | None = None,
    ):
        self.binders = tuple(binders) if binders is not None else default_binders()
        self.history = history

    @classmethod
    def from_settings(cls, settings: Settings, history: DiagnosticHistory | None = None) -> "BinderPipeline":
        """Build the default chain configured from settings."""
        directory_locator = ReachableDirectoryLocator(settings.shared_folders)
        binders = (
            ViewDescriptorBinder(),
            MasterPageBinder(SharedTemplateLocator(directory_locator), master_name=settings.fallback_master),
            ViewModelBinder(),
            ReachableBindingsBinder(directory_locator, bindings_file_name=settings.bindings_file_name),
        )
        return cls(binders, history=history)

    def run(self, request: BindRequest) -> None:
        """Apply every applicable binder to the request's target, in order."""
        for binder in self.binders:
            if binder.can_bind(request):
                binder.bind(request)

    def bind_templates(
        self,
        templates: Iterable[Template],
        types: TypeCatalog,
        directives: DirectiveSource = load_directives,
        tracer: BindingTracer | None = None,
        max_workers: int = 1,
    ) -> list[Template]:
        """Bind every template in the set.

        Args:
            templates: Discovered templates; read-only for the duration of the pass
            types: Catalog used to resolve view model types
            directives: Reads the binding directives a template declares
            tracer: Collects binder messages (a fresh one when omitted)
            max_workers: Worker threads; 1 binds sequentially

        Returns:
            The same templates, now carrying their descriptors

        Raises:
            OSError: If a template cannot be read
        """
        template_set = tuple(templates)
        tracer = tracer or BindingTracer()

        def bind_one(template: Template) -> None:
            declared = directives(template)
            request = BindRequest(
                target=template,
                master=MasterName.from_directive(declared.master),
                view_model_type=declared.view_model_type,
                namespaces=tuple(declared.namespaces),
                templates=template_set,
                types=types,
                logger=tracer,
            )
            self.run(request)
            self._record(template, tracer)

        if max_workers > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                # list() surfaces the first worker exception
                list(executor.map(bind_one, template_set))
        else:
            for template in template_set:
                bind_one(template)

        log_with_context(
            logger,
            "info",
            "Template binding complete",
            template_count=len(template_set),
            view_count=sum(1 for template in template_set if template.is_view()),
            event_type="binding_complete",
        )
        return list(template_set)

    def _record(self, template: Template, tracer: BindingTracer) -> None:
        if self.history is None:
            return
        messages = tracer.messages_for(template)
        if messages:
            self.history.add_report(BindingReport.for_pass(template, messages))
