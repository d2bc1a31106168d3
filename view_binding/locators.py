"""Default directory reachability and shared template lookup."""

from collections.abc import Iterable, Sequence
from pathlib import Path

from view_binding.models.templates import Template

DEFAULT_SHARED_FOLDERS = ("Shared",)


class ReachableDirectoryLocator:
    """Directories visible from a template: its own folder and every ancestor up to the root.

    Shared folders of each ancestor are reachable as well, provided some
    template actually lives in them. Directories are returned nearest first.
    """

    def __init__(self, shared_folders: Iterable[str] = DEFAULT_SHARED_FOLDERS):
        self.shared_folders = tuple(shared_folders)

    def get_directories(self, target: Template, templates: Sequence[Template]) -> list[Path]:
        occupied = {template.directory for template in templates}
        directories: list[Path] = []

        for directory in self._ancestors(target):
            directories.append(directory)
            for folder in self.shared_folders:
                shared = directory / folder
                if shared in occupied and shared not in directories:
                    directories.append(shared)

        return directories

    @staticmethod
    def _ancestors(target: Template) -> list[Path]:
        directory = target.directory
        root = target.root_path
        ancestors = [directory]

        if directory == root or root not in directory.parents:
            return ancestors

        for parent in directory.parents:
            ancestors.append(parent)
            if parent == root:
                break
        return ancestors


class SharedTemplateLocator:
    """Locates a master template by name among the directories reachable from a target."""

    def __init__(self, directory_locator: ReachableDirectoryLocator | None = None):
        self.directory_locator = directory_locator or ReachableDirectoryLocator()

    def locate_template(self, name: str, target: Template, templates: Sequence[Template]) -> Template | None:
        by_directory: dict[Path, list[Template]] = {}
        for template in templates:
            if template.is_spark_view() and template.name == name:
                by_directory.setdefault(template.directory, []).append(template)

        if not by_directory:
            return None

        for directory in self.directory_locator.get_directories(target, templates):
            matches = by_directory.get(directory)
            if matches:
                return matches[0]
        return None
