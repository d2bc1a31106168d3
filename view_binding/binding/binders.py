"""The binder chain: four policies that each contribute one piece of view metadata."""

from view_binding import protocols
from view_binding.binding.request import BindRequest
from view_binding.locators import ReachableDirectoryLocator, SharedTemplateLocator
from view_binding.models.templates import ViewDescriptor

FALLBACK_MASTER = "Application"
BINDINGS_FILE_NAME = "bindings.xml"


class ViewDescriptorBinder:
    """Classifies full spark views that declare a view model and attaches a fresh descriptor.

    Re-running it on a bound template replaces the existing descriptor.
    """

    def can_bind(self, request: BindRequest) -> bool:
        template = request.target
        return template.is_spark_view() and not template.is_partial() and bool(request.view_model_type)

    def bind(self, request: BindRequest) -> None:
        request.target.descriptor = ViewDescriptor(request.target)


class MasterPageBinder:
    """Resolves the master page wrapping a view.

    Every outcome produces exactly one log entry; a missing master is not an
    error and leaves the view standalone.
    """

    def __init__(
        self,
        locator: protocols.SharedTemplateLocator | None = None,
        master_name: str = FALLBACK_MASTER,
    ):
        self.locator = locator or SharedTemplateLocator()
        self.master_name = master_name

    def can_bind(self, request: BindRequest) -> bool:
        return request.target.is_view() and not request.master.is_none

    def bind(self, request: BindRequest) -> None:
        template = request.target
        tracer = request.logger
        master_name = request.master.resolve(self.master_name)

        master = self.locator.locate_template(master_name, template, request.templates)

        if master is None:
            tracer.log(template, "Expected master page [{0}] not found.", master_name)
            return

        if master.file_path == template.file_path:
            tracer.log(template, "Master page skipped on itself.", master_name)
            return

        template.descriptor.master = master
        tracer.log(template, "Master page [{0}] found at {1}", master_name, master.file_path)


class ViewModelBinder:
    """Resolves the declared view model name to a single type.

    No match and several matches are treated alike: no view model is bound.
    """

    def can_bind(self, request: BindRequest) -> bool:
        return request.target.is_view() and bool(request.view_model_type)

    def bind(self, request: BindRequest) -> None:
        template = request.target
        descriptor = template.descriptor

        types = list(request.types.types_with_full_name(request.view_model_type))
        descriptor.view_model = types[0] if len(types) == 1 else None

        request.logger.log(template, "View model type is : [{0}]", descriptor.view_model)


class ReachableBindingsBinder:
    """Attaches the binding declaration files that live in directories reachable from a view."""

    def __init__(
        self,
        locator: protocols.ReachableDirectoryLocator | None = None,
        bindings_file_name: str = BINDINGS_FILE_NAME,
    ):
        self.locator = locator or ReachableDirectoryLocator()
        self.bindings_file_name = bindings_file_name

    def can_bind(self, request: BindRequest) -> bool:
        return request.target.is_view()

    def bind(self, request: BindRequest) -> None:
        descriptor = request.target.descriptor

        candidates = [
            template
            for template in request.templates
            if template.file_name == self.bindings_file_name and template.is_xml()
        ]
        reachables = set(self.locator.get_directories(request.target, request.templates))

        for binding in candidates:
            if binding.directory in reachables:
                descriptor.add_binding(binding)
