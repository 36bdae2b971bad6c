"""Core utilities for the Google Docs markup exporter."""

from core.errors import (
    APIError,
    AuthenticationError,
    BatchApplyError,
    DocsExportError,
    DocumentNotFoundError,
    ServiceConfigurationError,
    ValidationError,
    translate_http_error,
    translate_transport_error,
)
from core.utils import validate_document_id

__all__ = [
    "APIError",
    "AuthenticationError",
    "BatchApplyError",
    "DocsExportError",
    "DocumentNotFoundError",
    "ServiceConfigurationError",
    "translate_http_error",
    "translate_transport_error",
    "validate_document_id",
    "ValidationError",
]
