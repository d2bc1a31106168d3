"""Filesystem discovery of templates under a template root."""

from collections.abc import Iterable
from pathlib import Path

from view_binding.exceptions import TemplateDiscoveryException, TemplateRootNotFoundException
from view_binding.logging_config import get_logger, log_with_context
from view_binding.models.templates import DEFAULT_VIEW_EXTENSION, XML_EXTENSION, Template

logger = get_logger(__name__)

DEFAULT_IGNORED_DIRECTORIES = ("bin", "obj", "node_modules", ".git")


class TemplateFinder:
    """Collects view and binding-declaration files beneath a root directory."""

    def __init__(
        self,
        root: Path | str,
        view_extension: str = DEFAULT_VIEW_EXTENSION,
        include_extensions: Iterable[str] | None = None,
        ignored_directories: Iterable[str] = DEFAULT_IGNORED_DIRECTORIES,
    ):
        self.root = Path(root).resolve()
        self.view_extension = view_extension.lower()
        if include_extensions is None:
            include_extensions = (self.view_extension, XML_EXTENSION)
        self.include_extensions = {extension.lower() for extension in include_extensions}
        self.ignored_directories = set(ignored_directories)

    def find(self) -> list[Template]:
        """Scan the root recursively.

        Returns:
            Templates sorted by path relative to the root

        Raises:
            TemplateRootNotFoundException: If the root does not exist
            TemplateDiscoveryException: If the root is not a directory
        """
        if not self.root.exists():
            raise TemplateRootNotFoundException(
                f"Template root {self.root} does not exist",
                details={"root": str(self.root)},
            )
        if not self.root.is_dir():
            raise TemplateDiscoveryException(
                f"Template root {self.root} is not a directory",
                details={"root": str(self.root)},
            )

        templates = [
            Template(path, self.root, view_extension=self.view_extension)
            for path in sorted(self.root.rglob("*"), key=lambda p: p.relative_to(self.root).as_posix())
            if self._include(path)
        ]

        log_with_context(
            logger,
            "info",
            "Templates discovered",
            root=str(self.root),
            template_count=len(templates),
            event_type="templates_discovered",
        )
        return templates

    def _include(self, path: Path) -> bool:
        if not path.is_file() or path.suffix.lower() not in self.include_extensions:
            return False
        relative_parts = path.relative_to(self.root).parts[:-1]
        return not any(part in self.ignored_directories for part in relative_parts)
