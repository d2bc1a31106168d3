"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from view_binding.binding import BindRequest
from view_binding.models import MasterName, Template
from view_binding.tracing import BindingTracer

VIEW_MODELS_SOURCE = '''
class HomeViewModel:
    pass


class ProductViewModel:
    class Line:
        pass
'''


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Empty template root inside the pytest temp directory."""
    root = tmp_path / "templates"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def make_template(template_root: Path):
    """Build a Template under the template root without touching the disk."""

    def _make(relative_path: str) -> Template:
        return Template(template_root / relative_path, template_root)

    return _make


@pytest.fixture
def write_tree(template_root: Path):
    """Write a {relative_path: content} mapping under the template root."""

    def _write(files: dict[str, str]) -> Path:
        for relative_path, content in files.items():
            path = template_root / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return template_root

    return _write


@pytest.fixture
def tracer() -> BindingTracer:
    return BindingTracer()


@pytest.fixture
def mock_logger():
    """Mock BindingLogger recording log calls."""
    return MagicMock(spec=["log"])


@pytest.fixture
def mock_types():
    """Mock TypeCatalog returning no matches by default."""
    types = MagicMock(spec=["types_with_full_name"])
    types.types_with_full_name.return_value = []
    return types


@pytest.fixture
def make_request(mock_types, mock_logger):
    """Build a BindRequest with mock collaborators."""

    def _make(
        target: Template,
        view_model_type: str | None = "app.models.HomeViewModel",
        master: MasterName | None = None,
        templates: tuple[Template, ...] = (),
        **overrides,
    ) -> BindRequest:
        fields = {
            "target": target,
            "master": master or MasterName.default(),
            "view_model_type": view_model_type,
            "templates": templates,
            "types": mock_types,
            "logger": mock_logger,
        }
        fields.update(overrides)
        return BindRequest(**fields)

    return _make


@pytest.fixture
def view_models_module(tmp_path: Path, monkeypatch) -> str:
    """Importable module holding sample view model classes."""
    package_dir = tmp_path / "site_packages"
    package_dir.mkdir()
    (package_dir / "sample_view_models.py").write_text(VIEW_MODELS_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(package_dir))
    return "sample_view_models"
