"""
Custom error types for Google Docs export operations.

Provides user-friendly error messages and structured error handling.
"""

from google.auth.exceptions import GoogleAuthError, TransportError
from googleapiclient.errors import HttpError

# =============================================================================
# Base Exception Hierarchy
# =============================================================================


class DocsExportError(Exception):
    """Base exception for all Google Docs export errors."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Authentication Errors
# =============================================================================


class AuthenticationError(DocsExportError):
    """Raised when service-account credentials are missing, invalid or rejected."""

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ServiceConfigurationError(DocsExportError):
    """Raised when the export service is misconfigured."""

    pass


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(DocsExportError):
    """Raised when input validation fails."""

    pass


# =============================================================================
# API Errors
# =============================================================================


class APIError(DocsExportError):
    """Raised for general Google Docs API errors."""

    def __init__(self, message: str, status_code: int | None = None, details: str | None = None):
        super().__init__(message, details=details)
        self.status_code = status_code


class DocumentNotFoundError(APIError):
    """Raised when the target document doesn't exist or isn't shared (404)."""

    def __init__(self, document_id: str, details: str | None = None):
        super().__init__(
            f"Document not found: {document_id}. Check the ID and that the document is shared with the service account.",
            status_code=404,
            details=details,
        )
        self.document_id = document_id


class BatchApplyError(APIError):
    """Raised when the remote batchUpdate fails. The batch is assumed not applied."""

    pass


def translate_http_error(error: HttpError, document_id: str, applying: bool = False) -> DocsExportError:
    """
    Convert a Google API HttpError into a DocsExportError.

    Args:
        error: The HttpError raised by the Docs client.
        document_id: The document the call addressed.
        applying: True when the error came from the batchUpdate write.
    """
    status = getattr(error.resp, "status", None)
    try:
        status = int(status)
    except (TypeError, ValueError):
        status = None
    error_str = str(error)

    if status == 404:
        return DocumentNotFoundError(document_id, details=error_str)
    if status in (401, 403):
        return AuthenticationError(
            f"Access to document {document_id} was denied ({status}). "
            "Share the document with the service account or check its credentials.",
            details=error_str,
        )
    if applying:
        return BatchApplyError(f"Batch update failed for document {document_id}: {error_str}", status, error_str)
    return APIError(f"Google Docs API error: {error_str}", status, error_str)



def translate_transport_error(error: Exception, document_id: str, applying: bool = False) -> DocsExportError:
    """
    Convert a credential refresh or network failure into a DocsExportError.

    Service-account credentials are refreshed on the first request, so a
    revoked or malformed key surfaces as a google-auth RefreshError from
    `.execute()` rather than as an HttpError.

    Args:
        error: A GoogleAuthError, httplib2 error or OSError raised by the Docs client.
        document_id: The document the call addressed.
        applying: True when the error came from the batchUpdate write.
    """
    error_str = str(error)
    if isinstance(error, GoogleAuthError) and not isinstance(error, TransportError):
        return AuthenticationError(f"Service account credentials were rejected: {error_str}", details=error_str)
    if applying:
        return BatchApplyError(f"Batch update failed for document {document_id}: {error_str}", details=error_str)
    return APIError(f"Could not reach Google Docs for document {document_id}: {error_str}", details=error_str)
