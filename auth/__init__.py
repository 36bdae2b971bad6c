# Make the auth directory a Python package
# Public API exports from canonical locations

from auth.config import (
    DOCS_EXPORT_APP_NAME,
    ExportConfig,
    get_export_config,
    reload_export_config,
)
from auth.scopes import DOCS_EXPORT_SCOPES

__all__ = [
    "DOCS_EXPORT_APP_NAME",
    "DOCS_EXPORT_SCOPES",
    "ExportConfig",
    "get_export_config",
    "reload_export_config",
]
