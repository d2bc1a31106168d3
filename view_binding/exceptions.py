"""Custom exceptions for view binding with HTTP status codes for the diagnostics surface."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    VIEW_BINDING_ERROR = "VIEW_BINDING_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Template discovery errors
    DISCOVERY_ERROR = "DISCOVERY_ERROR"
    TEMPLATE_ROOT_MISSING = "TEMPLATE_ROOT_MISSING"

    # Type catalog errors
    TYPE_CATALOG_ERROR = "TYPE_CATALOG_ERROR"
    TYPE_MODULE_IMPORT_FAILED = "TYPE_MODULE_IMPORT_FAILED"

    # Diagnostics lookups
    VIEW_NOT_FOUND = "VIEW_NOT_FOUND"


class ViewBindingException(Exception):
    """Base exception for view binding errors with HTTP status code support.

    The binder chain never raises; these are raised by the collaborators
    feeding it (discovery, type catalog) and by the diagnostics surface.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VIEW_BINDING_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize view binding exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class TemplateDiscoveryException(ViewBindingException):
    """Template discovery errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DISCOVERY_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class TemplateRootNotFoundException(TemplateDiscoveryException):
    """Template root directory does not exist."""

    def __init__(self, message: str = "Template root not found", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_ROOT_MISSING,
            status_code=500,
            details=details,
        )


class TypeCatalogException(ViewBindingException):
    """Type catalog errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TYPE_CATALOG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class TypeModuleImportException(TypeCatalogException):
    """A configured view model module could not be imported."""

    def __init__(self, message: str = "View model module import failed", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TYPE_MODULE_IMPORT_FAILED,
            status_code=500,
            details=details,
        )


class ViewNotFoundException(ViewBindingException):
    """No bound view exists at the requested path."""

    def __init__(self, message: str = "View not found", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.VIEW_NOT_FOUND,
            status_code=404,
            details=details,
        )
