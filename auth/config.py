"""
Export Configuration Management for the Google Docs markup exporter.

Reads service-account credentials and compiler options from the environment
and provides a single source of truth for them.
"""

import json
import os
from typing import Any

from core.errors import ServiceConfigurationError

# Application metadata
DOCS_EXPORT_APP_NAME = "GWS Docs Markup Export"

DEFAULT_STRIP_MODE = "fold"
VALID_STRIP_MODES = ("fold", "surgical")
DEFAULT_BULLET_FONT_SIZE = 12


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class ExportConfig:
    """
    Centralized export configuration.

    Service-account credentials come from GOOGLE_DOCS_SERVICE_ACCOUNT_JSON
    (inline JSON) or GOOGLE_DOCS_SERVICE_ACCOUNT_FILE (path); the inline form
    wins when both are set.
    """

    def __init__(self):
        # Service-account credentials
        self.service_account_json = os.getenv("GOOGLE_DOCS_SERVICE_ACCOUNT_JSON") or None
        self.service_account_file = os.getenv("GOOGLE_DOCS_SERVICE_ACCOUNT_FILE") or None

        # Target document used when a call doesn't name one
        self.default_document_id = os.getenv("GOOGLE_DOCS_DEFAULT_DOCUMENT_ID") or None

        # Compiler options
        self.strip_mode = os.getenv("DOCS_EXPORT_STRIP_MODE", DEFAULT_STRIP_MODE).lower()
        if self.strip_mode not in VALID_STRIP_MODES:
            raise ServiceConfigurationError(f"DOCS_EXPORT_STRIP_MODE must be one of {', '.join(VALID_STRIP_MODES)}")

        self.unescape_newlines = _env_flag("DOCS_EXPORT_UNESCAPE_NEWLINES", "true")

        bullet_font_size = os.getenv("DOCS_EXPORT_BULLET_FONT_SIZE", str(DEFAULT_BULLET_FONT_SIZE))
        try:
            self.bullet_font_size = float(bullet_font_size)
        except ValueError as e:
            raise ServiceConfigurationError(f"DOCS_EXPORT_BULLET_FONT_SIZE must be a number, got '{bullet_font_size}'") from e
        if self.bullet_font_size.is_integer():
            self.bullet_font_size = int(self.bullet_font_size)

    def is_configured(self) -> bool:
        """
        Check if service-account credentials are available.

        Returns:
            True if either the inline JSON or the key file path is set
        """
        return bool(self.service_account_json or self.service_account_file)

    def get_service_account_info(self) -> dict[str, Any]:
        """
        Load the service-account key as a dictionary.

        Returns:
            Parsed service-account info, as accepted by
            `service_account.Credentials.from_service_account_info`.

        Raises:
            ServiceConfigurationError: If no key is configured or it can't be parsed.
        """
        if self.service_account_json:
            source = "GOOGLE_DOCS_SERVICE_ACCOUNT_JSON"
            raw = self.service_account_json
        elif self.service_account_file:
            source = self.service_account_file
            path = os.path.expanduser(self.service_account_file)
            try:
                with open(path) as f:
                    raw = f.read()
            except OSError as e:
                raise ServiceConfigurationError(f"Cannot read service account key file '{path}': {e}") from e
        else:
            raise ServiceConfigurationError(
                "Google Docs service account not configured. "
                "Set GOOGLE_DOCS_SERVICE_ACCOUNT_JSON or GOOGLE_DOCS_SERVICE_ACCOUNT_FILE."
            )

        try:
            info = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ServiceConfigurationError(f"Service account key from {source} is not valid JSON: {e}") from e
        if not isinstance(info, dict):
            raise ServiceConfigurationError(f"Service account key from {source} must be a JSON object")
        return info

    def compiler_options(self) -> dict[str, Any]:
        """Keyword arguments for MarkupCompiler."""
        return {
            "strip_mode": self.strip_mode,
            "unescape_newlines": self.unescape_newlines,
            "bullet_font_size": self.bullet_font_size,
        }

    def get_environment_summary(self) -> dict:
        """
        Get a summary of the current export configuration.

        Returns:
            Dictionary with configuration summary (excluding secrets)
        """
        return {
            "service_account_configured": self.is_configured(),
            "service_account_source": "json" if self.service_account_json else ("file" if self.service_account_file else None),
            "default_document_id": self.default_document_id,
            "strip_mode": self.strip_mode,
            "unescape_newlines": self.unescape_newlines,
            "bullet_font_size": self.bullet_font_size,
        }


# Global configuration instance
_export_config: ExportConfig | None = None


def get_export_config() -> ExportConfig:
    """
    Get the global export configuration instance.

    Returns:
        The singleton export configuration instance
    """
    global _export_config
    if _export_config is None:
        _export_config = ExportConfig()
    return _export_config


def reload_export_config() -> ExportConfig:
    """
    Reload the export configuration from environment variables.

    This is useful for testing or when environment variables change.

    Returns:
        The reloaded export configuration instance
    """
    global _export_config
    _export_config = ExportConfig()
    return _export_config
