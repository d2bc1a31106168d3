"""Tests for custom exception classes."""

from view_binding.exceptions import (
    ErrorCode,
    TemplateDiscoveryException,
    TemplateRootNotFoundException,
    TypeCatalogException,
    TypeModuleImportException,
    ViewBindingException,
    ViewNotFoundException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes have correct values."""
        assert ErrorCode.VIEW_BINDING_ERROR == "VIEW_BINDING_ERROR"
        assert ErrorCode.DISCOVERY_ERROR == "DISCOVERY_ERROR"
        assert ErrorCode.TYPE_CATALOG_ERROR == "TYPE_CATALOG_ERROR"
        assert ErrorCode.VIEW_NOT_FOUND == "VIEW_NOT_FOUND"


class TestViewBindingException:
    """Tests for ViewBindingException."""

    def test_basic(self):
        """Test creating a basic exception."""
        exc = ViewBindingException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.VIEW_BINDING_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_with_details(self):
        """Test exception with details."""
        exc = ViewBindingException(
            message="Test error", code=ErrorCode.INTERNAL_ERROR, status_code=503, details={"root": "/srv"}
        )

        assert exc.code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 503
        assert exc.details["root"] == "/srv"


class TestSubclasses:
    """Tests for the exception hierarchy."""

    def test_template_root_not_found(self):
        """Test root-missing errors are discovery errors."""
        exc = TemplateRootNotFoundException()

        assert isinstance(exc, TemplateDiscoveryException)
        assert isinstance(exc, ViewBindingException)
        assert exc.code == ErrorCode.TEMPLATE_ROOT_MISSING
        assert exc.message == "Template root not found"

    def test_type_module_import(self):
        """Test import failures are type catalog errors."""
        exc = TypeModuleImportException(details={"module": "app.models"})

        assert isinstance(exc, TypeCatalogException)
        assert exc.code == ErrorCode.TYPE_MODULE_IMPORT_FAILED
        assert exc.details == {"module": "app.models"}

    def test_view_not_found(self):
        """Test view lookups map to 404."""
        exc = ViewNotFoundException()

        assert exc.status_code == 404
        assert exc.code == ErrorCode.VIEW_NOT_FOUND
