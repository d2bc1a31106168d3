"""Template and descriptor models shared by discovery and the binder chain."""

from enum import Enum
from pathlib import Path

DEFAULT_VIEW_EXTENSION = ".spark"
XML_EXTENSION = ".xml"
PARTIAL_PREFIX = "_"


class Template:
    """A discovered template file.

    Templates start without a descriptor. ViewDescriptorBinder is the only
    code that assigns one; later binders mutate its contents.
    """

    def __init__(self, file_path: Path | str, root_path: Path | str, view_extension: str = DEFAULT_VIEW_EXTENSION):
        self.file_path = Path(file_path)
        self.root_path = Path(root_path)
        self.view_extension = view_extension.lower()
        self.descriptor: ViewDescriptor | None = None

    @property
    def name(self) -> str:
        """Logical name: file name without extension."""
        return self.file_path.stem

    @property
    def file_name(self) -> str:
        return self.file_path.name

    @property
    def directory(self) -> Path:
        return self.file_path.parent

    @property
    def relative_path(self) -> str:
        """Path relative to the template root with forward slashes."""
        try:
            return self.file_path.relative_to(self.root_path).as_posix()
        except ValueError:
            return self.file_path.as_posix()

    def is_spark_view(self) -> bool:
        return self.file_path.suffix.lower() == self.view_extension

    def is_partial(self) -> bool:
        return self.is_spark_view() and self.file_name.startswith(PARTIAL_PREFIX)

    def is_xml(self) -> bool:
        return self.file_path.suffix.lower() == XML_EXTENSION

    def is_view(self) -> bool:
        """True once the template has been classified as a renderable view."""
        return isinstance(self.descriptor, ViewDescriptor)

    def __repr__(self) -> str:
        return f"Template({self.relative_path!r})"


class ViewDescriptor:
    """Resolved rendering metadata attached to a view template."""

    def __init__(self, template: Template):
        self.template = template
        self.master: Template | None = None
        self.view_model: type | None = None
        self.bindings: list[Template] = []

    def add_binding(self, template: Template) -> None:
        self.bindings.append(template)

    def __repr__(self) -> str:
        return (
            f"ViewDescriptor(template={self.template.relative_path!r}, "
            f"master={self.master.relative_path if self.master else None!r}, "
            f"view_model={self.view_model!r}, bindings={len(self.bindings)})"
        )


class MasterSelection(str, Enum):
    """How a view selects its master page."""

    DEFAULT = "default"
    NONE = "none"
    EXPLICIT = "explicit"


class MasterName:
    """Master page selection for one view.

    DEFAULT defers to the binder's fallback master, NONE opts out of any
    master, EXPLICIT carries a non-empty name.
    """

    __slots__ = ("selection", "name")

    def __init__(self, selection: MasterSelection, name: str | None = None):
        if selection is MasterSelection.EXPLICIT and not name:
            raise ValueError("An explicit master selection requires a name")
        if selection is not MasterSelection.EXPLICIT and name is not None:
            raise ValueError(f"{selection.value} master selection takes no name")
        self.selection = selection
        self.name = name

    @classmethod
    def default(cls) -> "MasterName":
        return cls(MasterSelection.DEFAULT)

    @classmethod
    def none(cls) -> "MasterName":
        return cls(MasterSelection.NONE)

    @classmethod
    def named(cls, name: str) -> "MasterName":
        return cls(MasterSelection.EXPLICIT, name)

    @classmethod
    def from_directive(cls, value: str | None) -> "MasterName":
        """Map a raw master attribute: missing -> DEFAULT, blank -> NONE, otherwise EXPLICIT."""
        if value is None:
            return cls.default()
        value = value.strip()
        if not value:
            return cls.none()
        return cls.named(value)

    @property
    def is_none(self) -> bool:
        return self.selection is MasterSelection.NONE

    def resolve(self, fallback: str) -> str | None:
        """Return the master name to look up, or None when no master is wanted."""
        if self.selection is MasterSelection.EXPLICIT:
            return self.name
        if self.selection is MasterSelection.DEFAULT:
            return fallback
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MasterName):
            return NotImplemented
        return self.selection is other.selection and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.selection, self.name))

    def __repr__(self) -> str:
        if self.selection is MasterSelection.EXPLICIT:
            return f"MasterName.named({self.name!r})"
        return f"MasterName.{self.selection.value}()"
