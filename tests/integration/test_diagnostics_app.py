"""Integration tests for the diagnostics application."""

import pytest
from fastapi.testclient import TestClient

from view_binding import __version__
from view_binding.config import Settings
from view_binding.core.app_factory import create_app


@pytest.fixture
def site_root(write_tree, view_models_module):
    return write_tree(
        {
            "Shared/Application.spark": "<html><use content='view' /></html>",
            "bindings.xml": "<bindings />",
            "Home/Index.spark": f'<viewdata model="{view_models_module}.HomeViewModel" />',
            "Home/bindings.xml": "<bindings />",
            "Products/List.spark": f'<viewdata model="{view_models_module}.ProductViewModel" />\n<use master="" />',
            "Products/_Row.spark": f'<viewdata model="{view_models_module}.ProductViewModel.Line" />',
        }
    )


@pytest.fixture
def client(site_root, view_models_module):
    settings = Settings(templates_root=site_root, view_model_modules=[view_models_module], history_capacity=1)
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def test_health(client):
    """Test health check endpoint returns status."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__}


def test_views_resolved_at_startup(client, view_models_module):
    """Test every view is bound before the first request."""
    response = client.get("/_diagnostics/views")

    assert response.status_code == 200
    views = {view["path"]: view for view in response.json()}
    assert sorted(views) == ["Home/Index.spark", "Products/List.spark"]

    index = views["Home/Index.spark"]
    assert index["master"] == "Shared/Application.spark"
    assert index["view_model"] == f"{view_models_module}.HomeViewModel"
    assert index["bindings"] == ["Home/bindings.xml", "bindings.xml"]

    products = views["Products/List.spark"]
    assert products["master"] is None
    assert products["bindings"] == ["bindings.xml"]


def test_single_view(client):
    """Test one view can be addressed by its relative path."""
    response = client.get("/_diagnostics/views/Home/Index.spark")

    assert response.status_code == 200
    assert response.json()["name"] == "Index"


def test_unknown_view_returns_structured_404(client):
    """Test unknown views map to the structured error body."""
    response = client.get("/_diagnostics/views/Products/_Row.spark")

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "VIEW_NOT_FOUND"
    assert error["details"] == {"path": "Products/_Row.spark"}


def test_history_is_bounded(client):
    """Test the history keeps only the configured number of reports."""
    response = client.get("/_diagnostics/history")

    assert response.status_code == 200
    reports = response.json()
    assert len(reports) == 1
    assert reports[0]["path"] == "Products/List.spark"
    assert reports[0]["messages"] == [f"View model type is : [<class '{reports[0]['view_model']}'>]"]


def test_missing_template_root_yields_empty_catalog(tmp_path):
    """Test startup survives a missing template root."""
    settings = Settings(templates_root=tmp_path / "missing")

    with TestClient(create_app(settings)) as test_client:
        response = test_client.get("/_diagnostics/views")

    assert response.status_code == 200
    assert response.json() == []


def test_bad_view_model_module_fails_startup(site_root):
    """Test an unimportable view model module aborts startup."""
    from view_binding.exceptions import TypeModuleImportException

    settings = Settings(templates_root=site_root, view_model_modules=["no_such_view_models"])

    with pytest.raises(TypeModuleImportException):
        with TestClient(create_app(settings)):
            pass
