"""
Google Docs batch executor.

The only code in the export path that talks to the Docs API: it reads the
document's current end and applies a compiled batch in one batchUpdate call.
Nothing here retries; a failed batch is reported as not applied.
"""

import logging
from collections.abc import Sequence
from typing import Any

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

from core.errors import translate_http_error, translate_transport_error
from gdocs.edit_batch import EditOperation, to_requests
from gdocs.markup_model import DocumentCursor

logger = logging.getLogger(__name__)

# Raised by .execute() before any HTTP response exists: credential refresh and network failures
REQUEST_FAILURES = (GoogleAuthError, httplib2.HttpLib2Error, OSError)


class DocsBatchExecutor:
    """
    Reads document length and applies edit batches through a Docs service.

    Args:
        service: An authenticated Google Docs v1 service.
    """

    def __init__(self, service: Any) -> None:
        self.service = service

    def read_cursor(self, document_id: str) -> DocumentCursor:
        """
        Get the position new content should be appended at.

        Raises:
            DocumentNotFoundError: If the document doesn't exist (404).
            AuthenticationError: If access is denied (401/403) or the credentials are rejected.
            APIError: For other API or network failures.
        """
        try:
            document = self.service.documents().get(documentId=document_id).execute()
        except HttpError as error:
            logger.error(f"Error getting document {document_id}: {error}")
            raise translate_http_error(error, document_id) from error
        except REQUEST_FAILURES as error:
            logger.error(f"Error getting document {document_id}: {error}")
            raise translate_transport_error(error, document_id) from error

        cursor = DocumentCursor.from_document(document)
        logger.debug(f"Document {document_id} ends at index {cursor.index} (empty={cursor.is_empty})")
        return cursor

    def apply(self, document_id: str, operations: Sequence[EditOperation]) -> int:
        """
        Apply `operations` as one atomic batchUpdate.

        Returns:
            Number of requests executed (0 for an empty batch, which makes no call).

        Raises:
            BatchApplyError: If the remote write fails, including network failures.
            DocumentNotFoundError: If the document disappeared (404).
            AuthenticationError: If access is denied (401/403) or the credentials are rejected.
        """
        if not operations:
            return 0

        requests = to_requests(operations)
        try:
            self.service.documents().batchUpdate(documentId=document_id, body={"requests": requests}).execute()
        except HttpError as error:
            logger.error(f"Batch update of {len(requests)} requests failed for {document_id}: {error}")
            raise translate_http_error(error, document_id, applying=True) from error
        except REQUEST_FAILURES as error:
            logger.error(f"Batch update of {len(requests)} requests failed for {document_id}: {error}")
            raise translate_transport_error(error, document_id, applying=True) from error

        logger.info(f"Applied {len(requests)} requests to document {document_id}")
        return len(requests)
