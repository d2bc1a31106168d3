"""Read-only lookup over bound templates."""

from collections.abc import Iterable

from view_binding.exceptions import ViewNotFoundException
from view_binding.models.templates import Template


class ViewCatalog:
    """Bound views keyed by their path relative to the template root."""

    def __init__(self, templates: Iterable[Template] = ()):
        self.templates = list(templates)
        self._views = {template.relative_path: template for template in self.templates if template.is_view()}

    def views(self) -> list[Template]:
        return list(self._views.values())

    def get(self, relative_path: str) -> Template:
        """Return the bound view at ``relative_path``.

        Raises:
            ViewNotFoundException: If no bound view has that path
        """
        template = self._views.get(relative_path.strip("/"))
        if template is None:
            raise ViewNotFoundException(
                f"No bound view at {relative_path!r}",
                details={"path": relative_path},
            )
        return template

    def __len__(self) -> int:
        return len(self._views)

    def __contains__(self, relative_path: object) -> bool:
        return relative_path in self._views
