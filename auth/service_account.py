"""
Service-account authentication for the Google Docs API.
"""

import logging
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build

from auth.config import ExportConfig, get_export_config
from auth.scopes import DOCS_EXPORT_SCOPES
from core.errors import AuthenticationError

logger = logging.getLogger(__name__)


def build_docs_service(config: ExportConfig | None = None, scopes: list[str] | None = None) -> Any:
    """
    Build an authenticated Google Docs v1 service.

    Args:
        config: Export configuration (default: the global instance).
        scopes: OAuth scopes to request (default: DOCS_EXPORT_SCOPES).

    Returns:
        Google Docs API service object

    Raises:
        ServiceConfigurationError: If no usable key is configured.
        AuthenticationError: If google-auth rejects the key.
    """
    config = config or get_export_config()
    info = config.get_service_account_info()

    try:
        credentials = service_account.Credentials.from_service_account_info(info, scopes=scopes or DOCS_EXPORT_SCOPES)
    except (GoogleAuthError, ValueError, KeyError) as e:
        raise AuthenticationError(f"Authentication failed: {e}") from e

    logger.info(f"Authenticated Google Docs service as {info.get('client_email', 'unknown service account')}")
    # Discovery cache writes to disk and warns on read-only filesystems
    return build("docs", "v1", credentials=credentials, cache_discovery=False)
