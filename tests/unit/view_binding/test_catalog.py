"""Unit tests for the view catalog."""

import pytest

from view_binding.catalog import ViewCatalog
from view_binding.exceptions import ViewNotFoundException
from view_binding.models import ViewDescriptor


@pytest.fixture
def templates(make_template):
    index = make_template("Home/Index.spark")
    index.descriptor = ViewDescriptor(index)
    return [index, make_template("Shared/_Menu.spark"), make_template("bindings.xml")]


def test_only_views_are_listed(templates):
    """Test templates without descriptors are not views."""
    catalog = ViewCatalog(templates)

    assert catalog.views() == [templates[0]]
    assert len(catalog) == 1
    assert "Home/Index.spark" in catalog
    assert catalog.templates == templates


def test_get_by_relative_path(templates):
    """Test lookup tolerates surrounding slashes."""
    catalog = ViewCatalog(templates)

    assert catalog.get("/Home/Index.spark") is templates[0]


def test_get_unknown_raises(templates):
    """Test unknown and non-view paths raise ViewNotFoundException."""
    catalog = ViewCatalog(templates)

    with pytest.raises(ViewNotFoundException):
        catalog.get("Shared/_Menu.spark")
