"""Unit tests for template discovery."""

import pytest

from view_binding.discovery import TemplateFinder
from view_binding.exceptions import ErrorCode, TemplateDiscoveryException, TemplateRootNotFoundException


def test_finds_views_and_xml_sorted(write_tree):
    """Test views and XML files are collected in relative path order."""
    root = write_tree(
        {
            "Shared/Application.spark": "",
            "Home/Index.spark": "",
            "Home/bindings.xml": "",
            "Home/readme.txt": "",
            "bindings.xml": "",
        }
    )

    templates = TemplateFinder(root).find()

    assert [t.relative_path for t in templates] == [
        "Home/Index.spark",
        "Home/bindings.xml",
        "Shared/Application.spark",
        "bindings.xml",
    ]
    assert all(t.root_path == root for t in templates)


def test_ignored_directories(write_tree):
    """Test build output folders are skipped."""
    root = write_tree({"bin/Debug/Index.spark": "", "obj/bindings.xml": "", "Home/Index.spark": ""})

    templates = TemplateFinder(root).find()

    assert [t.relative_path for t in templates] == ["Home/Index.spark"]


def test_custom_view_extension(write_tree):
    """Test the view extension drives both discovery and classification."""
    root = write_tree({"Home/Index.html": "", "Home/Old.spark": ""})

    templates = TemplateFinder(root, view_extension=".html").find()

    assert [t.relative_path for t in templates] == ["Home/Index.html"]
    assert templates[0].is_spark_view()


def test_missing_root(tmp_path):
    """Test a missing root raises a dedicated exception."""
    with pytest.raises(TemplateRootNotFoundException) as exc_info:
        TemplateFinder(tmp_path / "nope").find()

    assert exc_info.value.code == ErrorCode.TEMPLATE_ROOT_MISSING


def test_root_is_a_file(tmp_path):
    """Test a file root is a discovery error."""
    file_root = tmp_path / "templates.spark"
    file_root.write_text("", encoding="utf-8")

    with pytest.raises(TemplateDiscoveryException) as exc_info:
        TemplateFinder(file_root).find()

    assert exc_info.value.code == ErrorCode.DISCOVERY_ERROR
