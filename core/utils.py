import logging
import re

from core.errors import ValidationError

logger = logging.getLogger(__name__)

DOCUMENT_ID_PATTERN = re.compile(r"^[\w\-]+$")


def validate_document_id(document_id: str | None, param_name: str = "document_id") -> str:
    """Validate a Google Docs document ID."""
    if not document_id:
        raise ValidationError(f"{param_name} is required (or set GOOGLE_DOCS_DEFAULT_DOCUMENT_ID)")

    document_id = document_id.strip()
    if not document_id:
        raise ValidationError(f"{param_name} cannot be empty")

    if not DOCUMENT_ID_PATTERN.match(document_id):
        raise ValidationError(f"{param_name} contains invalid characters")

    return document_id
